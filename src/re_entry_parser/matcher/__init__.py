"""Compiled-pattern matching with last-match group access."""

from re_entry_parser.matcher.compiled_pattern import CompiledPattern, compile_pattern
from re_entry_parser.matcher.match_result import NO_MATCH, MatchResult
from re_entry_parser.matcher.matcher_holder import MatcherHolder
from re_entry_parser.matcher.pattern_flags import PatternFlags

__all__ = [
    "CompiledPattern",
    "compile_pattern",
    "MatchResult",
    "NO_MATCH",
    "MatcherHolder",
    "PatternFlags",
]
