"""
Constants and configuration values for Snapshot Print Flow.
Centralizes all magic numbers and configuration constants.
"""


# Border Detection Constants
class BorderConstants:
    """Constants related to background classification and border cropping."""

    # A pixel whose luma is strictly below this value is background
    BACKGROUND_LUMA_THRESHOLD = 16

    # BT.601 luma weights in thousandths; weighted sums are floored
    LUMA_WEIGHTS = (299, 587, 114)
    LUMA_WEIGHT_SCALE = 1000

    # Pixel layout
    CHANNELS = 3


# Levels Remap Constants
class LevelsConstants:
    """Constants for the brightness lift."""

    CHANNEL_MAX = 255
    MIN_LUMA_OFFSET = 0
    MAX_LUMA_OFFSET = 255
    NO_CHANGE_OFFSET = 0


# Snapshot File Constants
class SnapshotConstants:
    """Constants related to snapshot discovery and output naming."""

    # Appended to the source stem; also used to skip prior outputs
    OUTPUT_SUFFIX = "-vlc-print-out"

    # Thumbnail returned by the API
    DEFAULT_THUMBNAIL_WIDTH = 320
    THUMBNAIL_JPEG_QUALITY = 70


# Printing Constants
class PrintConstants:
    """Constants for dispatching output files to the printer."""

    WINDOWS_PLATFORM_PREFIX = "win"
    WINDOWS_PRINT_COMMAND = ("mspaint", "/p")
    PRINT_TIMEOUT_SECONDS = 120


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # API
    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 8000


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    NO_CONTENT_FOUND = "No content found: image of {width}x{height} is entirely background"
    CROP_OUT_OF_BOUNDS = "Crop rectangle {rect} does not fit inside {width}x{height} image"
    CROP_EMPTY = "Crop rectangle {rect} has zero width or height"
    INVALID_PIXEL_BUFFER = "Invalid pixel buffer: {reason}"
    INVALID_LUMA_OFFSET = "Luma offset must be an integer in [0, 255], got {value!r}"
    SNAPSHOT_DIR_UNREADABLE = "Failed to read snapshot directory {directory}"
    NO_SNAPSHOT_FOUND = "No valid snapshot files in {directory}"
    DECODE_FAILED = "Failed to decode {path}"
    ENCODE_FAILED = "Failed to save cropped image to {path}"
    PRINT_NOT_SUPPORTED = "Printing is not supported on platform {platform!r}"
    PRINT_FAILED = "Couldn't print {path} through {command}"
