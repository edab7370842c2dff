#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String and regex helpers
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Any, Literal, Optional, Union, overload

RegexLike = Union[str, "re.Pattern[str]"]

# region Common functions


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


def resolve_path(path: Path | str) -> Path:
    """Expand ``~`` and return an absolute path (the file need not exist)."""
    return Path(path).expanduser().absolute()


# endregion Common functions

# region Regex helpers


@overload
def compile_regex(pattern: None) -> None: ...
@overload
def compile_regex(pattern: RegexLike) -> re.Pattern[str]: ...


def compile_regex(pattern: Optional[RegexLike]) -> Optional[re.Pattern[str]]:
    """Accept a pattern string or a compiled pattern; pass ``None`` through."""
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def exact_name_regex(name: str) -> re.Pattern[str]:
    """A pattern matching ``name`` and nothing else (so no sub-categories)."""
    return re.compile(f"^{re.escape(name)}$")


# endregion Regex helpers
