"""
Application constants and metadata.
"""

# Application info
APP_NAME = "SML"
APP_VERSION = "0.1.0"

# Numeric defaults
DEFAULT_INTEGER_BITS = 32
SUPPORTED_INTEGER_BITS = (32, 64)
DEFAULT_PRECISION = "double"

# Source files are read as UTF-8
DEFAULT_ENCODING = "utf-8"

# Log file rotation
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3
