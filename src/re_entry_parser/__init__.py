"""Single-regex matcher core for line-oriented listing parsers."""

from re_entry_parser.config import PatternConfig
from re_entry_parser.exceptions import (
    EntryParserError,
    GroupIndexOutOfRangeError,
    InvalidPatternError,
)
from re_entry_parser.logging_config import setup_logging
from re_entry_parser.matcher import (
    NO_MATCH,
    CompiledPattern,
    MatcherHolder,
    MatchResult,
    PatternFlags,
    compile_pattern,
)
from re_entry_parser.parsing import ExtractingEntryParser, FieldExtractor, RegexEntryParser

__all__ = [
    # Config
    "PatternConfig",
    # Errors
    "EntryParserError",
    "GroupIndexOutOfRangeError",
    "InvalidPatternError",
    # Logging
    "setup_logging",
    # Matcher
    "CompiledPattern",
    "compile_pattern",
    "MatcherHolder",
    "MatchResult",
    "NO_MATCH",
    "PatternFlags",
    # Parsing
    "ExtractingEntryParser",
    "FieldExtractor",
    "RegexEntryParser",
]
