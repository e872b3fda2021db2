# bot_server/__init__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Bot server: entry point and per-message orchestration.

This package runs the Telegram bot event loop, including:
- Startup credential checks and scratch directory setup
- Routing inbound text messages to the link pipeline
- Per-link delivery with a single editable status message

Submodules are not imported here: `python -m bot_server` loads the .env
file before anything reads config.
"""
