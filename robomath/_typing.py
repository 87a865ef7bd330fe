from typing import Union

import numpy as np
import numpy.typing as npt

FLOAT_ARRAY = npt.NDArray[np.floating]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, np.floating, FLOAT_ARRAY]

FLOAT_DTYPE = npt.DTypeLike
