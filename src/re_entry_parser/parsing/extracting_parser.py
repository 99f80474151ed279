from __future__ import annotations

from typing import Optional, TypeVar

from loguru import logger

from re_entry_parser.config import PatternConfig
from re_entry_parser.parsing.entry_parser import RegexEntryParser
from re_entry_parser.parsing.field_extractor import FieldExtractor

T = TypeVar("T")


class ExtractingEntryParser(RegexEntryParser[T]):
    """Entry parser that hands each successful match to a field extractor."""

    def __init__(self, regex: str, extractor: FieldExtractor[T], flags: int = 0) -> None:
        super().__init__(regex, flags)
        self.extractor = extractor

    @classmethod
    def from_config(cls, config: PatternConfig, extractor: FieldExtractor[T]) -> "ExtractingEntryParser[T]":
        return cls(config.regex, extractor, config.flags)

    def parse_entry(self, line: str) -> Optional[T]:
        result = self.match(line)
        if not result:
            return None
        try:
            return self.extractor(result)
        except ValueError as e:
            logger.warning("Skipped invalid entry {!r}: {}", line, e)
            return None
