# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit(cache=False)
def gamma_encode_kernel(linear, output):
    """
    Square-root gamma, clamp to [0, 1], scale to 8 bits (truncating).
    """
    for k in range(linear.shape[0]):
        c = linear[k]
        # Also catches NaN.
        if not c > 0.0:
            output[k] = 0
            continue
        c = math.sqrt(c)
        if c > 1.0:
            c = 1.0
        output[k] = int(c * 255.0)


def encode_buffer(linear: np.ndarray) -> np.ndarray:
    """
    Converts averaged linear radiance (any shape, RGB last) into a flat
    row-major uint8 buffer.
    """
    flat = np.ascontiguousarray(linear, dtype=np.float64).ravel()
    output = np.empty(flat.shape[0], dtype=np.uint8)
    gamma_encode_kernel(flat, output)
    return output
