"""Tests for sketch name rules and their precedence."""

import pytest

from services.errors import NameValidationError
from services.name_validation import (
    EMPTY_NAME_MESSAGE,
    SPACES_MESSAGE,
    SYMBOLS_MESSAGE,
    duplicate_name_message,
    is_allowed_character,
    validate_sketch_name,
)


def _reject(name, existing=()):
    with pytest.raises(NameValidationError) as excinfo:
        validate_sketch_name(name, existing)
    return excinfo.value


class TestRules:
    def test_accepts_plain_name(self):
        assert validate_sketch_name("valid-name_123", ["other"]) == "valid-name_123"

    def test_empty_name(self):
        error = _reject("")
        assert error.message == EMPTY_NAME_MESSAGE
        assert error.suggested_name == ""

    def test_duplicate_names_the_file(self):
        error = _reject("Orbit", ["Orbit"])
        assert error.message == duplicate_name_message("Orbit")
        assert "'Orbit'" in error.message
        assert error.suggested_name == "Orbit"

    def test_spaces_suggest_underscores(self):
        error = _reject("a b  c")
        assert error.message == SPACES_MESSAGE
        assert error.suggested_name == "a_b__c"

    def test_symbols_keep_name(self):
        error = _reject("bad$name")
        assert error.message == SYMBOLS_MESSAGE
        assert error.suggested_name == "bad$name"

    def test_error_is_a_value_error(self):
        assert isinstance(_reject(""), ValueError)


class TestPrecedence:
    def test_duplicate_wins_over_spaces(self):
        error = _reject("Foo Bar", ["Foo Bar"])
        assert error.message == duplicate_name_message("Foo Bar")

    def test_spaces_win_over_symbols(self):
        error = _reject("a $b")
        assert error.message == SPACES_MESSAGE
        assert error.suggested_name == "a_$b"

    def test_near_duplicate_is_not_duplicate(self):
        error = _reject("Foo Bar", ["Foo"])
        assert error.message == SPACES_MESSAGE
        assert error.suggested_name == "Foo_Bar"

    def test_duplicate_match_is_case_sensitive(self):
        assert validate_sketch_name("foo", ["Foo"]) == "foo"


class TestCharacterSet:
    @pytest.mark.parametrize("name", ["Ünïcødé", "名前", "Привет", "café", "x-_09"])
    def test_letters_of_any_script_are_allowed(self, name):
        assert validate_sketch_name(name, []) == name

    @pytest.mark.parametrize("name", ["tab\there", "dot.pde", "slash/name", "emoji🙂", "٣"])
    def test_other_characters_are_fancy(self, name):
        assert _reject(name).message == SYMBOLS_MESSAGE

    def test_only_ascii_digits(self):
        assert is_allowed_character("7")
        assert not is_allowed_character("٣")
