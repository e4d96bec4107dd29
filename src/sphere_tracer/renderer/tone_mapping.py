# renderer/tone_mapping.py
import numpy as np
from numba import njit

GAMMA = 2.2

@njit
def gamma_quantize_kernel(linear_image, output_image, gamma):
    inv_gamma = 1.0 / gamma
    for y in range(linear_image.shape[0]):
        for x in range(linear_image.shape[1]):
            for c in range(linear_image.shape[2]):
                v = linear_image[y, x, c]
                # NaN fails the comparison and maps to 0 as well
                if not v > 0.0:
                    output_image[y, x, c] = 0
                else:
                    # Clamp before the int conversion, huge values and inf overflow int64
                    q = v ** inv_gamma * 255.0 + 0.5
                    if q >= 255.0:
                        output_image[y, x, c] = 255
                    else:
                        output_image[y, x, c] = int(q)

def gamma_quantize(linear, gamma=GAMMA):
    """
    Gamma-correct a linear (height, width, 3) image and quantize it to 8 bits,
    clamping every channel to [0, 255].
    """
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.zeros(linear.shape, dtype=np.uint8)
    gamma_quantize_kernel(linear, output, float(gamma))
    return output

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=GAMMA):
    """
    Apply Reinhard tone mapping to a linear radiance image, then gamma-correct
    and quantize. Useful when lights push channels well past 1.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return gamma_quantize(mapped, gamma)
