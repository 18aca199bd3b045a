from env.env import (
    ConfigError,
    Environment,
    LoggingEnvironment,
    _load_dotenv,
    get_env,
    get_logging_env,
    reset_env_caches,
)

from env.paths import AUTH_DIR, CONFIG_DIR, LOGS_DIR, PROJECT_ROOT

__all__ = [
    "ConfigError",
    "Environment",
    "LoggingEnvironment",
    "get_env",
    "get_logging_env",
    "reset_env_caches",
    "AUTH_DIR",
    "CONFIG_DIR",
    "LOGS_DIR",
    "PROJECT_ROOT",
    "_load_dotenv",
]
