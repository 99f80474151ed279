"""Single-pattern matcher shared by the regex-driven entry parsers.

A ``MatcherHolder`` owns one compiled pattern and the result of the last
full-line match against it. Typical use is one holder per parser, fed one
listing line at a time::

    holder = MatcherHolder(r"(\\d+) (\\w+)")
    if holder.matches("42 apples"):
        size, name = holder.group(1), holder.group(2)

``match`` returns the ``MatchResult`` directly for callers that prefer not to
rely on the holder's last-match state.

Instances are not thread-safe: ``matches``/``match``/``set_regex`` replace
state that the group accessors read. Serialize access when sharing one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from loguru import logger

from re_entry_parser.matcher.compiled_pattern import CompiledPattern, compile_pattern
from re_entry_parser.matcher.match_result import NO_MATCH, MatchResult
from re_entry_parser.matcher.pattern_flags import PatternFlags

if TYPE_CHECKING:
    from re_entry_parser.config import PatternConfig


class MatcherHolder:
    def __init__(self, regex: str, flags: int = 0) -> None:
        """
        Compile ``regex`` up front so a malformed pattern fails at construction.

        :param regex: The regular expression each entry line must fully match.
        :param flags: ``PatternFlags`` (or ``re`` flags) to compile with; 0 for none.
        :raises InvalidPatternError: If the expression cannot be compiled.
        """
        self._pattern: CompiledPattern = compile_pattern(regex, flags)
        self._result: MatchResult = NO_MATCH

    @classmethod
    def from_config(cls, config: PatternConfig) -> "MatcherHolder":
        return cls(config.regex, config.flags)

    @property
    def pattern(self) -> CompiledPattern:
        return self._pattern

    @property
    def regex(self) -> str:
        return self._pattern.regex

    @property
    def flags(self) -> PatternFlags:
        return self._pattern.flags

    @property
    def last_result(self) -> MatchResult:
        """Outcome of the most recent match attempt, ``NO_MATCH`` if none."""
        return self._result

    def match(self, line: str) -> MatchResult:
        """Fully match ``line`` against the current pattern and remember the outcome."""
        if not isinstance(line, str):
            raise TypeError(f"line must be str, not {type(line).__name__}")
        self._result = NO_MATCH
        m = self._pattern.fullmatch(line)
        if m is not None:
            self._result = MatchResult.from_match(m)
        return self._result

    def matches(self, line: str) -> bool:
        """Return True if ``line`` matches the pattern end to end."""
        return self.match(line).matched

    def group_count(self) -> int:
        return self._result.group_count

    def group(self, n: int) -> Optional[str]:
        """Group ``n`` of the last match; None if the last attempt failed."""
        return self._result.group(n)

    def dump(self) -> str:
        return self._result.dump()

    def set_regex(self, regex: str, flags: int = 0) -> bool:
        """
        Replace the active pattern.

        On success the previous match outcome is discarded, since its group
        numbers belong to the old pattern. On failure nothing changes.

        :return: True once the new pattern is in place.
        :raises InvalidPatternError: If the expression cannot be compiled.
        """
        pattern = compile_pattern(regex, flags)
        logger.debug("Replacing regex {!r} with {!r}", self._pattern.regex, pattern.regex)
        self._pattern = pattern
        self._result = NO_MATCH
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(regex={self._pattern.regex!r}, flags={self._pattern.flags!r})"
