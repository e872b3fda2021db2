# media/__init__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Media retrieval: platform detection, downloads, audio derivation and
resolution of extraction API payloads into local files.
"""
