from blogdash.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    LimiterConfig,
    Settings,
    file_logger,
    pool_kwargs,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "LimiterConfig",
    "Settings",
    "file_logger",
    "pool_kwargs",
    "settings",
]
