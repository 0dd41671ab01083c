"""Tests for share record parsing and share set assembly."""

import json

import pytest

from sharerecon.errors import (
    InvalidCharacterError,
    InvalidDigitError,
    ShareCountMismatchError,
    ShareFormatError,
)
from sharerecon.shares.loader import (
    load_share_file,
    parse_share_json,
    parse_share_record,
)
from sharerecon.shares.models import ShareSet


RECORD = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_parse_record():
    share_set = parse_share_record(RECORD)
    assert share_set.n == 4
    assert share_set.k == 3
    assert share_set.shares == {1: 4, 2: 7, 3: 12, 6: 39}


def test_mixed_bases():
    record = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "16", "value": "ff"},
        "2": {"base": 2, "value": "1010"},
    }
    assert parse_share_record(record).shares == {1: 255, 2: 10}


def test_string_encoded_keys():
    record = dict(RECORD, keys={"n": "4", "k": "3"})
    share_set = parse_share_record(record)
    assert (share_set.n, share_set.k) == (4, 3)


def test_numeric_value_accepted():
    record = {"keys": {"n": 1, "k": 1}, "7": {"base": 10, "value": 123}}
    assert parse_share_record(record).shares == {7: 123}


def test_ascending_x_order():
    record = {
        "keys": {"n": 3, "k": 2},
        "10": {"base": "10", "value": "1"},
        "2": {"base": "10", "value": "2"},
        "9": {"base": "10", "value": "3"},
    }
    share_set = parse_share_record(record)
    assert [x for x, _ in share_set.points()] == [2, 9, 10]
    assert share_set.select() == [(2, 2), (9, 3)]


def test_select_explicit_k():
    share_set = parse_share_record(RECORD)
    assert share_set.select(2) == [(1, 4), (2, 7)]
    assert share_set.select(4) == share_set.points()


def test_select_too_many():
    share_set = ShareSet(n=2, k=2, shares={1: 1, 2: 2})
    with pytest.raises(ShareFormatError, match="only 2 available"):
        share_set.select(3)


def test_count_mismatch():
    record = dict(RECORD, keys={"n": 5, "k": 3})
    with pytest.raises(ShareCountMismatchError) as exc_info:
        parse_share_record(record)
    assert exc_info.value.expected == 5
    assert exc_info.value.actual == 4


def test_colliding_keys_count_once():
    # "1" and "01" are the same x.
    record = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "5"},
        "01": {"base": "10", "value": "6"},
    }
    with pytest.raises(ShareCountMismatchError):
        parse_share_record(record)


def test_invalid_digit_propagates():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "12"}}
    with pytest.raises(InvalidDigitError):
        parse_share_record(record)


def test_invalid_character_propagates():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "1.5"}}
    with pytest.raises(InvalidCharacterError):
        parse_share_record(record)


def test_missing_keys_field():
    with pytest.raises(ShareFormatError, match="'keys'"):
        parse_share_record({"1": {"base": "10", "value": "1"}})


def test_threshold_out_of_range():
    record = dict(RECORD, keys={"n": 4, "k": 5})
    with pytest.raises(ShareFormatError, match="Invalid threshold"):
        parse_share_record(record)
    record = dict(RECORD, keys={"n": 4, "k": 0})
    with pytest.raises(ShareFormatError):
        parse_share_record(record)


def test_bad_base():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "1", "value": "0"}}
    with pytest.raises(ShareFormatError):
        parse_share_record(record)
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "sixteen", "value": "0"}}
    with pytest.raises(ShareFormatError):
        parse_share_record(record)


def test_missing_value():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "10"}}
    with pytest.raises(ShareFormatError):
        parse_share_record(record)


def test_non_decimal_share_key():
    record = {"keys": {"n": 1, "k": 1}, "x1": {"base": "10", "value": "1"}}
    with pytest.raises(ShareFormatError, match="not a non-negative decimal"):
        parse_share_record(record)
    record = {"keys": {"n": 1, "k": 1}, "-1": {"base": "10", "value": "1"}}
    with pytest.raises(ShareFormatError):
        parse_share_record(record)


def test_record_not_an_object():
    with pytest.raises(ShareFormatError, match="JSON object"):
        parse_share_json("[1, 2, 3]")


def test_invalid_json():
    with pytest.raises(ShareFormatError, match="Invalid share JSON"):
        parse_share_json("{not json")


def test_load_share_file(tmp_path):
    path = tmp_path / "case.json"
    path.write_text(json.dumps(RECORD))
    assert load_share_file(path).shares == {1: 4, 2: 7, 3: 12, 6: 39}


def test_load_missing_file(tmp_path):
    with pytest.raises(ShareFormatError, match="Cannot read"):
        load_share_file(tmp_path / "missing.json")


def test_share_set_is_frozen():
    share_set = ShareSet(n=1, k=1, shares={1: 2})
    with pytest.raises(AttributeError):
        share_set.k = 2
