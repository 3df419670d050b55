# renderer/image_writer.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image
from renderer.tone_mapping import to_8bit

logger = logging.getLogger(__name__)

def write_ppm(out: Union[str, Path, TextIO], buffer: np.ndarray):
    """
    Write a linear (height, width, 3) buffer as a plain-text P3 PPM, one
    pixel per line, rows top to bottom.
    """
    if isinstance(out, (str, Path)):
        with open(out, "w", newline="\n") as f:
            write_ppm(f, buffer)
        return

    pixels = to_8bit(buffer)
    height, width, _ = pixels.shape
    out.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            out.write(f"{r} {g} {b}\n")

def write_png(path: Union[str, Path], buffer: np.ndarray):
    Image.fromarray(to_8bit(buffer)).save(path)

def save_image(path: Union[str, Path], buffer: np.ndarray) -> Path:
    """
    Save the buffer, choosing the encoder from the file suffix. Anything that
    is not .ppm goes through Pillow.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, buffer)
    else:
        write_png(path, buffer)
    logger.info("Wrote %dx%d image to %s", buffer.shape[1], buffer.shape[0], path)
    return path
