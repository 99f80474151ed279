"""Base class for parsers that recognise listing entries with one regex."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TextIO, TypeVar

from re_entry_parser.matcher.match_result import MatchResult
from re_entry_parser.matcher.matcher_holder import MatcherHolder

T = TypeVar("T")


class RegexEntryParser(ABC, Generic[T]):
    """Abstract entry parser backed by a single ``MatcherHolder``.

    The pattern is compiled when the parser is created, so a subclass built
    with a bad regex raises ``InvalidPatternError`` during setup.
    """

    def __init__(self, regex: str, flags: int = 0) -> None:
        self.matcher = MatcherHolder(regex, flags)

    @abstractmethod
    def parse_entry(self, line: str) -> Optional[T]:
        """
        Parse one listing line.

        :param line: A single raw entry, without its line terminator.
        :return: The parsed record, or None if the line is not an entry.
        """

    def read_next_entry(self, stream: TextIO) -> Optional[str]:
        """
        Read the next raw entry from ``stream``.

        Entries are one line long by default; formats that spread an entry
        over several lines override this.

        :return: The entry without its line terminator, or None at end of stream.
        """
        line = stream.readline()
        if not line:
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line

    def pre_parse(self, entries: List[str]) -> List[str]:
        """Hook for filtering raw entries before they are parsed; the default keeps them all."""
        return entries

    def match(self, line: str) -> MatchResult:
        return self.matcher.match(line)

    def matches(self, line: str) -> bool:
        return self.matcher.matches(line)

    def group(self, n: int) -> Optional[str]:
        return self.matcher.group(n)

    def group_count(self) -> int:
        return self.matcher.group_count()

    def dump(self) -> str:
        return self.matcher.dump()

    def set_regex(self, regex: str, flags: int = 0) -> bool:
        return self.matcher.set_regex(regex, flags)
