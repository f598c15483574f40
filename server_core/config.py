from __future__ import annotations

# ===== SERVER CONFIG =====
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8080

GREETING = "Hello world!"

APP_VERSION = "0.1.0"

# ===== LOG CONFIG =====
LOGGER_NAME = "hello_server"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | v=%(v)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def server_url(host: str = SERVER_HOST, port: int = SERVER_PORT) -> str:
    return f"http://{host}:{port}/"
