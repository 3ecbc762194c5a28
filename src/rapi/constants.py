"""Constants shared across rapi."""

# Status codes
DEFAULT_OK_STATUS_CODE = 200
NOT_IMPLEMENTED_STATUS_CODE = 501

# HTTP methods
METHOD_GET = "GET"
METHOD_POST = "POST"

# Client defaults (seconds)
DEFAULT_CONNECTION_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0

# Logging
LOGGER_NAME = "rapi"
