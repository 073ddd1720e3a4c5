"""
Constants and configuration values for Film Camera.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Path store keys
ORIGINAL_IMAGES_KEY = "original_images"
FILTERED_IMAGES_KEY = "filtered_images"

# File naming
ORIGINAL_FILE_PREFIX = "original"
FILTERED_FILE_PREFIX = "film"
IMAGE_EXTENSION = ".jpg"
IMAGES_DIR_NAME = "Images"
PATH_STORE_FILE_NAME = "image_paths.json"
CONFIG_FILE_NAME = "film_camera.json"

# Codec
JPEG_FORMAT = "JPEG"
DEFAULT_JPEG_QUALITY = 95
MIN_CAPTURE_QUALITY = 90
MAX_JPEG_QUALITY = 100

# Channel range
CHANNEL_MIN = 0
CHANNEL_MAX = 255
CONTRAST_PIVOT = 128.0

# BT.601 luma weights
LUMA_RED = 0.299
LUMA_GREEN = 0.587
LUMA_BLUE = 0.114

# Grain
DEFAULT_GRAIN_AMOUNT = 3
MAX_GRAIN_AMOUNT = 5
DEFAULT_GRAIN_SEED = 1954

# Vignette
DEFAULT_VIGNETTE_STRENGTH = 0.35

# Worker pool
DEFAULT_MAX_WORKERS = 2
DEFAULT_FILTER_TIMEOUT = None

# Config field names
FIELD_FILM_TYPE = "film_type"

# Supported input formats for directory capture sources
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".tiff", ".webp"}
