# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line splitting shared by documents and ignore files."""

from __future__ import annotations

import re
from typing import Final

_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on any newline convention, keeping a trailing empty line."""

    return _NEWLINE.split(text)


__all__ = ["split_lines"]
