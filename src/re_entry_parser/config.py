"""Configuration records for entry patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from re_entry_parser.matcher.pattern_flags import PatternFlags


@dataclass
class PatternConfig:
    """A regex and the flags to compile it with."""

    regex: str
    flags: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PatternConfig":
        """Build a config from a mapping such as a decoded JSON object.

        ``flags`` may be an int or a list of flag names (``["i", "MULTILINE"]``).
        """
        if "regex" not in data:
            raise ValueError("Pattern config requires a 'regex' entry")

        flags = data.get("flags", 0)
        if isinstance(flags, (list, tuple)):
            flags = PatternFlags.from_names(flags)
        elif isinstance(flags, bool) or not isinstance(flags, int):
            raise ValueError(f"Invalid flags value: {flags!r}")

        return cls(regex=data["regex"], flags=int(flags), name=data.get("name", ""))

    def to_dict(self) -> Dict[str, Any]:
        return {"regex": self.regex, "flags": int(self.flags), "name": self.name}
