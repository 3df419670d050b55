# materials/texture_loader.py
import logging
from pathlib import Path
from typing import Union
from core.config import TEXTURE_DIR
from materials.material import Material
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def resolve_texture_path(image_path: Union[str, Path]) -> Path:
    """
    Relative paths that do not exist as given are looked up under TEXTURE_DIR.
    """
    path = Path(image_path)
    if not path.exists() and not path.is_absolute() and (TEXTURE_DIR / path).exists():
        return TEXTURE_DIR / path
    return path

def load_texture(image_path: Union[str, Path]) -> ImageTexture:
    """
    Load an image file as a texture.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    image_path = resolve_texture_path(image_path)
    texture = ImageTexture(str(image_path))
    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture

def create_image_material(image_path: Union[str, Path], material_class, **material_params) -> Material:
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, Metal)
        **material_params: Additional parameters for the material (e.g., fuzz for Metal)

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
