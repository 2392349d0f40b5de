#!/usr/bin/env python3
"""
PinMeta API server: entrypoint for `python -m pinmeta_server.server` or the `pinmeta-server` script.
"""

import uvicorn

from .app import app
from .config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
