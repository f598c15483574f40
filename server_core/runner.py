from __future__ import annotations

import logging
import socket

import uvicorn
from fastapi import FastAPI

from .config import SERVER_HOST, SERVER_PORT, server_url


def bind_socket(host: str = SERVER_HOST, port: int = SERVER_PORT) -> socket.socket:
    """
    Same bind as uvicorn.Config.bind_socket(), done here so a bind failure
    (e.g. port already in use) reaches the caller as a raw OSError.
    uvicorn would log it and sys.exit(1) instead.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    return sock


def run_server(app: FastAPI, host: str = SERVER_HOST, port: int = SERVER_PORT) -> None:
    logger: logging.Logger = app.state.logger
    # logged before bind: appears once per process, even if bind fails
    logger.info("Starting the server at %s", server_url(host, port))

    sock = bind_socket(host, port)
    try:
        config = uvicorn.Config(
            app=app,
            host=host,
            port=port,
            log_level="warning",  # app logger is the primary one
            loop="asyncio",
        )
        server = uvicorn.Server(config)
        server.run(sockets=[sock])
    finally:
        sock.close()
