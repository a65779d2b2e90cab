import numpy as np

__all__ = ['float_', 'complex_']

# Default float data type.
float_ = np.float64

# Default complex data type.
complex_ = np.complex128
