# bot_server/__main__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Allow running the bot as python -m bot_server."""
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv  # pyright: ignore[reportMissingImports]


def run() -> None:
    # .env must be loaded before config is imported
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        logging.getLogger("dotenv.main").setLevel(logging.ERROR)
        load_dotenv(env_file)

    from .main import main

    asyncio.run(main())


if __name__ == "__main__":
    run()
