# renderer/tone_mapping.py
import numpy as np

# Largest channel value before 8-bit quantization, keeps 1.0 at 255
INTENSITY_MAX = 0.999

def linear_to_gamma(linear: np.ndarray) -> np.ndarray:
    """
    Gamma 2 transform of a linear radiance buffer. Negative values map to 0.
    """
    return np.sqrt(np.maximum(linear, 0.0))

def to_8bit(linear: np.ndarray) -> np.ndarray:
    """
    Convert a linear (height, width, 3) buffer to gamma-corrected uint8.
    """
    linear = np.nan_to_num(linear, nan=0.0)
    mapped = np.clip(linear_to_gamma(linear), 0.0, INTENSITY_MAX)
    return (mapped * 256).astype(np.uint8)
