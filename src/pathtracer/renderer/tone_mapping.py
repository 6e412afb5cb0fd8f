# renderer/tone_mapping.py
import numpy as np

# Largest value that still truncates into the 8-bit range.
QUANTIZE_SCALE = 255.999


def gamma_quantize(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Convert summed linear radiance to 8-bit gamma-corrected color.

    The sum is averaged over the sample count, clamped to [0, 1], gamma
    corrected with a square root (gamma 2) and truncated to uint8. Works on
    any array whose last axis holds the RGB channels.
    """
    scale = 1.0 / samples_per_pixel
    linear = np.nan_to_num(np.asarray(accumulated, dtype=np.float64) * scale,
                           nan=0.0, posinf=1.0, neginf=0.0)
    linear = np.clip(linear, 0.0, 1.0)
    return (np.sqrt(linear) * QUANTIZE_SCALE).astype(np.uint8)
