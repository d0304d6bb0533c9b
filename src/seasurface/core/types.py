"""Type definitions shared by the height-field and host modules."""

from typing import TypeAlias

import numpy as np
from jax import Array

Scalar: TypeAlias = float | np.floating | Array

# Host buffers are plain numpy; height-field kernels return JAX arrays
FloatArray: TypeAlias = Array | np.ndarray
