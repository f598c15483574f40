"""
Entry point:

  hello-server
  python hello_server.py
  python -m uvicorn hello_server:app --host 127.0.0.1 --port 8080 --log-level warning

All real logic lives in server_core/.
A bind failure is not caught: the process exits non-zero.
"""

from __future__ import annotations

from server_core.app_factory import create_app
from server_core.runner import run_server

app = create_app()


def main() -> None:
    run_server(app)


if __name__ == "__main__":
    main()
