import re

import pytest

from re_entry_parser import GroupIndexOutOfRangeError, MatchResult, NO_MATCH


def _result(pattern: str, line: str) -> MatchResult:
    m = re.fullmatch(pattern, line)
    assert m is not None
    return MatchResult.from_match(m)


def test_no_match_is_falsy_and_empty():
    assert not NO_MATCH
    assert NO_MATCH.group_count == 0
    assert NO_MATCH.group(1) is None
    assert NO_MATCH.named("anything") is None
    assert NO_MATCH.dump() == ""


def test_from_match_copies_groups():
    result = _result(r"(?P<size>\d+) (?P<name>\S+)", "1024 readme.txt")
    assert result.matched
    assert result.text == "1024 readme.txt"
    assert result.captures == ("1024", "readme.txt")
    assert result.group_count == 2


def test_named_groups():
    result = _result(r"(?P<size>\d+) (?P<name>\S+)", "1024 readme.txt")
    assert result.named("size") == "1024"
    assert result.named("name") == "readme.txt"
    with pytest.raises(GroupIndexOutOfRangeError):
        result.named("owner")


def test_group_count_counts_non_participating_groups():
    result = _result(r"(a)|(b)", "b")
    assert result.group_count == 2
    assert result.group(1) is None
    assert result.group(2) == "b"


def test_pattern_without_groups():
    result = _result(r"total \d+", "total 12")
    assert result.group_count == 0
    assert result.dump() == ""
    with pytest.raises(GroupIndexOutOfRangeError):
        result.group(1)


@pytest.mark.parametrize("index", ["1", 1.0, True, None])
def test_non_integer_index_is_rejected(index):
    result = _result(r"(\d)", "5")
    with pytest.raises(GroupIndexOutOfRangeError):
        result.group(index)


def test_result_is_immutable():
    result = _result(r"(\d)", "5")
    with pytest.raises(AttributeError):
        result.matched = False


def test_to_dict():
    result = _result(r"(\d+)(x)?", "12")
    assert result.to_dict() == {
        "matched": True,
        "text": "12",
        "span": [0, 2],
        "captures": ["12", None],
        "group_names": {},
    }
    assert NO_MATCH.to_dict()["span"] is None


def test_no_match_group_names_are_read_only():
    with pytest.raises(TypeError):
        NO_MATCH.group_names["size"] = 1
    assert dict(NO_MATCH.group_names) == {}
