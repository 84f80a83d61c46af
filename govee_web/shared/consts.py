from enum import Enum

DEFAULT_GOVEE_API_URL = "https://developer-api.govee.com"
DEFAULT_CACHE_TTL_SECONDS = 300
DEFAULT_BIND_ADDR = "127.0.0.1"
DEFAULT_PORT = 3000

# Paths excluded from request logging
UNLOGGED_PATHS = frozenset({"/health"})


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
