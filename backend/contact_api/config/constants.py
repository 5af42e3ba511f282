"""
Application-wide constants for configuration and tuning.

Environment-dependent settings (database, upload folder, CORS) belong in
settings.py. This file is for operational parameters that rarely change
between environments.
"""

# ==============================================================================
# DATABASE
# ==============================================================================

# Connection pool size for the PostgreSQL engine
DB_POOL_SIZE: int = 10

# Extra connections allowed above the pool size under load
DB_POOL_MAX_OVERFLOW: int = 20

# Integer primary keys and contact_id references fit a signed 32-bit column
ROW_ID_MIN: int = 1
ROW_ID_MAX: int = 2**31 - 1

# ==============================================================================
# COLUMN LIMITS
# ==============================================================================

CONTACT_NAME_MAX_LENGTH: int = 255
PHONE_NUMBER_MAX_LENGTH: int = 50
IMAGE_URL_MAX_LENGTH: int = 500

USERNAME_MAX_LENGTH: int = 255
PASSWORD_MAX_LENGTH: int = 255
ROLE_MAX_LENGTH: int = 50

# ==============================================================================
# UPLOADS
# ==============================================================================

# Read size when pulling an uploaded image off the request (1MB)
UPLOAD_READ_CHUNK_BYTES: int = 1024 * 1024
