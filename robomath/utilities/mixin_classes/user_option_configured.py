"""
This module provides the :class:`UserOptionConfigured` mixin class that enables classes to be
configured using :class:`.UserOptions`-derived classes while maintaining the ability to reset
to the original configuration state.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from robomath.utilities.options import UserOptions
        from robomath.utilities.mixin_classes.user_option_configured import UserOptionConfigured
        from dataclasses import dataclass

        @dataclass
        class MyOptions(UserOptions):
            a: int = 5
            b: float = -32.1

        class MyUsefulClass(UserOptionConfigured[MyOptions], MyOptions):
            def __init__(self, options: MyOptions = None):
                super().__init__(MyOptions, options=options)

        my_useful_inst = MyUsefulClass()
        my_useful_inst.a = 6
        my_useful_inst.reset_settings()
        print(my_useful_inst.a)  # Output: 5

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order
    due to Method Resolution Order (MRO) requirements.
"""

import copy

from typing import Generic, TypeVar

from robomath.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions-based configuration with reset capability.

    :param OptionsT: The :class:`UserOptions`-derived class type for configuration

    :attr original_options: The original configuration used during initialization.
                            This is stored as a deep copy and used for reset operations.

    .. Warning::
        If options are not provided during initialization, default initialization of the
        options_type class will be used.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the class to the state it was originally initialized with.
        """

        self.original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        Get the original configuration options.

        .. Warning::
            Modifying the returned object will affect reset behavior.
        """
        return self._original_options
