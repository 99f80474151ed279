"""Exceptions raised by the entry-parser matcher."""

from __future__ import annotations

from typing import Optional


class EntryParserError(Exception):
    """Base exception for entry-parser errors."""


class InvalidPatternError(EntryParserError, ValueError):
    """Raised when a regular expression cannot be compiled.

    A parser holding a bad pattern is a programming defect, so this is raised
    as soon as the pattern is supplied rather than on the first match.
    """

    def __init__(self, regex: str, flags: int = 0, reason: Optional[str] = None):
        self.regex = regex
        self.flags = flags
        self.reason = reason

        message = f"Unparseable regex supplied: {regex!r}"
        if flags:
            message = f"{message} (flags={flags:#x})"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(message)


class GroupIndexOutOfRangeError(EntryParserError, IndexError):
    """Raised when a group number falls outside ``[1, group_count]``."""

    def __init__(self, index: object, group_count: int):
        self.index = index
        self.group_count = group_count
        super().__init__(f"No such group: {index!r} (pattern defines {group_count} groups)")
