"""
Small shared utilities: the :class:`.UserOptions` configuration dataclass base and the mixins that consume it.
"""

from robomath.utilities.options import UserOptions
from robomath.utilities.mixin_classes import UserOptionConfigured

__all__ = ["UserOptions", "UserOptionConfigured"]
