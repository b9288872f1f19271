"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_POOL_MIN = 1
DEFAULT_POOL_MAX = 10

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_ID_MESSAGE = "Invalid ID"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"
