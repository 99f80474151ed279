import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from re_entry_parser import InvalidPatternError, MatcherHolder

LINE_PATTERN = r"(\d+) ([a-z]+)(?: (x))?"

digits = st.text(alphabet="0123456789", min_size=1, max_size=8)
words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12)
lines = st.text(max_size=40)

valid_patterns = st.sampled_from(
    [
        r"",
        r"(a)",
        r"(\d+)-(\d+)",
        r"(?P<name>\w+)=(?P<value>.*)",
        r"(?:(a)|(b))+",
        r"((x)(y)?)z",
        LINE_PATTERN,
    ]
)
invalid_patterns = st.sampled_from(
    ["(", ")", "[", "a{2,1}", "*a", "(?P<1>x)", "(?<", r"\1(a)", "a{4294967296}", "x{0,4294967296}"]
)


@given(regex=valid_patterns, flags=st.sampled_from([0, re.IGNORECASE, re.MULTILINE | re.DOTALL]))
def test_construction_starts_without_groups(regex, flags):
    holder = MatcherHolder(regex, flags)
    assert holder.group_count() == 0


@given(regex=invalid_patterns)
def test_malformed_patterns_never_construct(regex):
    with pytest.raises(InvalidPatternError):
        MatcherHolder(regex)


@given(size=digits, name=words)
def test_matching_lines_expose_every_group(size, name):
    holder = MatcherHolder(LINE_PATTERN)
    assert holder.matches(f"{size} {name}")
    assert holder.group_count() == 3
    assert holder.group(1) == size
    assert holder.group(2) == name
    assert holder.group(3) is None


@given(size=digits, name=words, line=lines)
def test_failed_match_never_leaks_stale_groups(size, name, line):
    holder = MatcherHolder(LINE_PATTERN)
    holder.matches(f"{size} {name}")
    if re.fullmatch(LINE_PATTERN, line) is None:
        assert not holder.matches(line)
        assert holder.group_count() == 0
        assert holder.group(1) is None


@given(first=lines, second=lines)
def test_latest_match_supersedes_earlier(first, second):
    holder = MatcherHolder(LINE_PATTERN)
    holder.matches(first)
    second_matched = holder.matches(second)

    fresh = MatcherHolder(LINE_PATTERN)
    assert fresh.matches(second) == second_matched
    assert holder.last_result == fresh.last_result


@settings(max_examples=50)
@given(line=lines, bad=invalid_patterns)
def test_failed_replacement_keeps_behavior(line, bad):
    holder = MatcherHolder(LINE_PATTERN)
    before = holder.matches(line)
    result_before = holder.last_result

    with pytest.raises(InvalidPatternError):
        holder.set_regex(bad)

    assert holder.last_result is result_before
    assert holder.matches(line) == before
    assert holder.last_result == result_before
