# -*- coding: utf-8 -*-
"""Validator tests."""

import logging

import pytest

from pctenc import InvalidCharacter, is_unreserved, is_valid, validate


@pytest.mark.parametrize("encoded", [
    "",
    "plain",
    "A-Z_a-z.0-9~",
    "%20",
    "%aF%Af",
    "this%20that",
])
def test_validate_accepts(encoded):
    validate(encoded)
    assert is_valid(encoded)


@pytest.mark.parametrize("encoded, character, index", [
    ("a b", " ", 1),
    ("%", "%", 0),
    ("%4", "%", 0),
    ("%41%", "%", 3),
    ("%G0", "G", 1),
    ("%0g", "g", 2),
    ("%%41", "%", 1),
    ("ab👾", "👾", 2),
    ("%2👾", "👾", 2),
    ("%👾", "👾", 1),
    ("ok/", "/", 2),
    ("a+b", "+", 1),
])
def test_validate_rejects(encoded, character, index):
    with pytest.raises(InvalidCharacter) as exc_info:
        validate(encoded)

    assert exc_info.value.character == character
    assert exc_info.value.index == index
    assert not is_valid(encoded)


def test_validate_reports_first_error_only():
    with pytest.raises(InvalidCharacter) as exc_info:
        validate("a b%")

    assert exc_info.value == InvalidCharacter(" ", 1)


def test_validate_hex_digits_are_ascii_only():
    # fullwidth digits are digits, but not hex digits
    with pytest.raises(InvalidCharacter) as exc_info:
        validate("%１２")

    assert exc_info.value == InvalidCharacter("１", 1)


def test_invalid_character_message():
    assert str(InvalidCharacter("%", 11)) == "invalid character '%' at index 11"


def test_validate_logs_rejection(caplog):
    caplog.set_level(logging.DEBUG, logger="pctenc")

    with pytest.raises(InvalidCharacter):
        validate("a b")

    assert any("rejected 'a b'" in rec.message for rec in caplog.records)


@pytest.mark.parametrize("c, expected", [
    ("a", True),
    ("Z", True),
    ("7", True),
    ("-", True),
    ("_", True),
    (".", True),
    ("~", True),
    ("%", False),
    (" ", False),
    ("é", False),
    ("", False),
])
def test_is_unreserved(c, expected):
    assert is_unreserved(c) is expected
