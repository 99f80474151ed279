from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

from loguru import logger

from re_entry_parser.exceptions import InvalidPatternError
from re_entry_parser.matcher.pattern_flags import PatternFlags


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An immutable compiled regex together with the text and flags it came from."""

    regex: str
    flags: PatternFlags
    compiled: re.Pattern = field(repr=False, compare=False)

    @property
    def group_count(self) -> int:
        return self.compiled.groups

    @property
    def group_names(self) -> Mapping[str, int]:
        return self.compiled.groupindex

    def fullmatch(self, line: str) -> Optional[re.Match]:
        return self.compiled.fullmatch(line)


def compile_pattern(regex: str, flags: int = 0) -> CompiledPattern:
    """
    Compile ``regex`` with ``flags`` or fail immediately.

    :param regex: The regular expression source text.
    :param flags: A ``PatternFlags``/``re`` flag set; 0 for none.
    :return: The compiled pattern.
    :raises InvalidPatternError: If the engine rejects the expression or the flags.
    """
    if not isinstance(regex, str):
        raise TypeError(f"regex must be str, not {type(regex).__name__}")

    unsupported = PatternFlags.unsupported_bits(flags)
    if unsupported:
        logger.debug("Rejecting regex {!r}: unsupported flag bits {:#x}", regex, unsupported)
        raise InvalidPatternError(regex, int(flags), f"unsupported flag bits {unsupported:#x}")

    pattern_flags = PatternFlags(int(flags))
    try:
        compiled = re.compile(regex, pattern_flags.value)
    except (re.error, ValueError, OverflowError, RecursionError) as exc:
        logger.debug("Rejecting regex {!r}: {}", regex, exc)
        raise InvalidPatternError(regex, pattern_flags.value, str(exc)) from exc

    logger.debug("Compiled regex {!r} with flags {!r} ({} groups)", regex, pattern_flags, compiled.groups)
    return CompiledPattern(regex=regex, flags=pattern_flags, compiled=compiled)
