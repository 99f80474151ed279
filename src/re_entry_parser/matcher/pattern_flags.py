"""Engine flags accepted when compiling an entry pattern.

Values mirror Python's ``re`` module, so ``re.IGNORECASE`` and
``PatternFlags.IGNORECASE`` can be mixed freely.
"""

import re
from enum import IntFlag
from typing import Iterable


class PatternFlags(IntFlag):
    """Compile-time flags understood by the matcher."""

    NONE = 0
    IGNORECASE = re.IGNORECASE.value  # i - case insensitive
    MULTILINE = re.MULTILINE.value  # m - ^ and $ match at newlines
    DOTALL = re.DOTALL.value  # s - . matches newlines
    VERBOSE = re.VERBOSE.value  # x - ignore whitespace/comments
    ASCII = re.ASCII.value  # a - ASCII-only \w, \d, \s
    UNICODE = re.UNICODE.value  # u - default for str patterns

    ALL = IGNORECASE | MULTILINE | DOTALL | VERBOSE | ASCII | UNICODE

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "PatternFlags":
        """Build a flag set from inline letters (``"i"``) or member names (``"IGNORECASE"``)."""
        flags = cls.NONE
        for name in names:
            key = name.strip()
            if key.lower() in _INLINE_LETTERS:
                flags |= _INLINE_LETTERS[key.lower()]
            elif key.upper() in cls.__members__ and key.upper() != "ALL":
                flags |= cls[key.upper()]
            else:
                raise ValueError(f"Unsupported pattern flag: {name}")
        return flags

    @classmethod
    def unsupported_bits(cls, flags: int) -> int:
        """Return the bits of ``flags`` that are not supported flags."""
        return int(flags) & ~cls.ALL.value


_INLINE_LETTERS = {
    "i": PatternFlags.IGNORECASE,
    "m": PatternFlags.MULTILINE,
    "s": PatternFlags.DOTALL,
    "x": PatternFlags.VERBOSE,
    "a": PatternFlags.ASCII,
    "u": PatternFlags.UNICODE,
}
