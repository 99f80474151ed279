"""Regex-driven listing entry parsers."""

from re_entry_parser.parsing.entry_parser import RegexEntryParser
from re_entry_parser.parsing.extracting_parser import ExtractingEntryParser
from re_entry_parser.parsing.field_extractor import FieldExtractor

__all__ = [
    "RegexEntryParser",
    "ExtractingEntryParser",
    "FieldExtractor",
]
