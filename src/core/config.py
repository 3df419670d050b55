"""Configuration for the path tracer, read from environment variables."""

import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("PT_OUTPUT_DIR", PROJECT_ROOT / "output"))
TEXTURE_DIR = Path(os.getenv("PT_TEXTURE_DIR", PROJECT_ROOT / "textures"))

# Logging settings
LOG_LEVEL = os.getenv("PT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_FILE = os.getenv("PT_LOG_FILE") or None

# Render settings
DEFAULT_SEED = int(os.getenv("PT_SEED", "42"))
DEFAULT_WORKERS = int(os.getenv("PT_WORKERS", str(os.cpu_count() or 1)))
DEFAULT_EXECUTOR = os.getenv("PT_EXECUTOR", "process")

# BVH split axis policy: "longest", "random" or "sah"
BVH_SPLIT_AXIS = os.getenv("PT_BVH_SPLIT_AXIS", "longest")

# Named quality presets applied on top of a scene's camera
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 4},
    "preview": {"samples": 32, "bounces": 12},
    "final": {"samples": 200, "bounces": 50},
}

__all__ = [
    "PROJECT_ROOT",
    "OUTPUT_DIR",
    "TEXTURE_DIR",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "DEFAULT_SEED",
    "DEFAULT_WORKERS",
    "DEFAULT_EXECUTOR",
    "BVH_SPLIT_AXIS",
    "QUALITY_LEVELS",
]
