# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""apiblint CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app, main
from .shared import CLIServices

__all__: Final[list[str]] = ["CLIServices", "app", "main"]
