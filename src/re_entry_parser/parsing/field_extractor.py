from __future__ import annotations

from typing import Protocol, TypeVar

from re_entry_parser.matcher.match_result import MatchResult

T_co = TypeVar("T_co", covariant=True)


class FieldExtractor(Protocol[T_co]):
    """Maps the groups of a successful match onto a record."""

    def __call__(self, result: MatchResult) -> T_co:
        ...
