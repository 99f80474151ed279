from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from re_entry_parser.exceptions import GroupIndexOutOfRangeError


@dataclass(frozen=True, slots=True)
class MatchResult:
    matched: bool
    text: Optional[str]                              # group 0, the whole matched line
    span: Optional[Tuple[int, int]]
    captures: Tuple[Optional[str], ...] = ()         # groups 1..n, None where a group did not participate
    group_names: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_match(cls, m: re.Match) -> "MatchResult":
        return cls(
            matched=True,
            text=m.group(0),
            span=m.span(),
            captures=tuple(m.groups()),
            group_names=MappingProxyType(dict(m.re.groupindex)),
        )

    def __bool__(self) -> bool:
        return self.matched

    @property
    def group_count(self) -> int:
        """Number of groups the pattern defines; 0 when nothing matched."""
        if not self.matched:
            return 0
        return len(self.captures)

    def group(self, n: int) -> Optional[str]:
        """
        Return the text captured by group ``n`` (1-based).

        Returns None when there is no match, or when group ``n`` exists but took
        no part in this match. Raises GroupIndexOutOfRangeError for a matched
        result if ``n`` is outside ``[1, group_count]``.
        """
        if not self.matched:
            return None
        if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= len(self.captures):
            raise GroupIndexOutOfRangeError(n, len(self.captures))
        return self.captures[n - 1]

    def named(self, name: str) -> Optional[str]:
        """Return the text captured by the named group ``name``."""
        if not self.matched:
            return None
        if name not in self.group_names:
            raise GroupIndexOutOfRangeError(name, len(self.captures))
        return self.captures[self.group_names[name] - 1]

    def dump(self) -> str:
        """For debugging: one ``"<n>) <text>"`` line per group, empty when unmatched."""
        if not self.matched:
            return ""
        lines = []
        for i, value in enumerate(self.captures, start=1):
            lines.append(f"{i}) {'' if value is None else value}{os.linesep}")
        return "".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "text": self.text,
            "span": list(self.span) if self.span is not None else None,
            "captures": list(self.captures),
            "group_names": dict(self.group_names),
        }


NO_MATCH = MatchResult(matched=False, text=None, span=None)
