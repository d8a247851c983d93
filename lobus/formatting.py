"""Inline color tags for menu text.

The default menu wraps text in tag pairs such as ``<cyan>1</cyan>``. Output
sinks either translate those to ANSI escapes or strip them.
"""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

ANSI_RESET = "\033[0m"

TAG_COLOR_MAP = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bold": "\033[1m",
}
TAG_PATTERN = re.compile(r"<([a-zA-Z_]+)>(.*?)</\1>", re.DOTALL)


def format_tags(text: str, *, strip: bool = False) -> str:
    if not text or "<" not in text:
        return text

    def replace(match: re.Match[str]) -> str:
        kind = match.group(1).strip().lower()
        value = format_tags(match.group(2), strip=strip)
        color = TAG_COLOR_MAP.get(kind)
        if strip or not color:
            return value
        return f"{color}{value}{ANSI_RESET}"

    return TAG_PATTERN.sub(replace, text)


def strip_tags(text: str) -> str:
    return format_tags(text, strip=True)


def console_sink(*, strip: bool = False, stream: TextIO | None = None) -> Callable[[str], None]:
    def say(line: str) -> None:
        print(format_tags(line, strip=strip), file=stream or sys.stdout, flush=True)

    return say
