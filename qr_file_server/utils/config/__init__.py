from .server_config import (
    DEFAULT_BIND_HOST,
    DEFAULT_MOUNT_PATH,
    DEFAULT_PORT,
    DEFAULT_SERVE_FROM,
    ServerConfig,
)

__all__ = (
    "ServerConfig",
    "DEFAULT_BIND_HOST",
    "DEFAULT_MOUNT_PATH",
    "DEFAULT_PORT",
    "DEFAULT_SERVE_FROM",
)
