"""Tests for the illegal sequence rule."""

import pytest

from passrule.core.exceptions import PolicyConfigurationError
from passrule.core.rules import EnglishSequenceData, IllegalSequenceRule, SequenceData
from passrule.domain.entities import PasswordData


class TestIllegalSequenceRule:
    """Test windowed sequence matching."""

    def test_forward_sequence(self):
        """Test that a run of five digits is rejected."""
        rule = IllegalSequenceRule("0123456789", length=5, wrap=False, match_backwards=True)
        result = rule.validate(PasswordData("ab34567cd"))

        assert result.valid is False
        assert result.error_codes == ["ILLEGAL_SEQUENCE"]
        assert result.details[0].parameters["sequence"] == "34567"

    def test_reverse_sequence_enabled(self):
        """Test that a descending run is rejected when reverse matching is on."""
        rule = IllegalSequenceRule("0123456789", length=5, match_backwards=True)
        result = rule.validate(PasswordData("x98765y"))
        assert result.details[0].parameters["sequence"] == "98765"

    def test_reverse_sequence_disabled(self):
        """Test that a descending run passes when reverse matching is off."""
        rule = IllegalSequenceRule("0123456789", length=5, match_backwards=False)
        assert rule.validate(PasswordData("x98765y")).valid is True

    def test_every_window_reported(self):
        """Test that overlapping windows are all reported."""
        rule = IllegalSequenceRule("0123456789", length=5)
        result = rule.validate(PasswordData("0123456"))
        assert [d.parameters["sequence"] for d in result.details] == ["01234", "12345", "23456"]

    def test_duplicate_windows_reported_once(self):
        """Test that the same window at two positions is reported once."""
        rule = IllegalSequenceRule("0123456789", length=5)
        result = rule.validate(PasswordData("12345x12345"))
        assert len(result.details) == 1

    def test_report_first_only(self):
        """Test that only the first window is reported when report_all is off."""
        rule = IllegalSequenceRule("0123456789", length=5, report_all=False)
        result = rule.validate(PasswordData("0123456"))
        assert [d.parameters["sequence"] for d in result.details] == ["01234"]

    def test_wrap(self):
        """Test that wrapping makes the sequence circular."""
        data = PasswordData("a89012b")
        assert IllegalSequenceRule("0123456789", length=5, wrap=False).validate(data).valid is True

        result = IllegalSequenceRule("0123456789", length=5, wrap=True).validate(data)
        assert result.details[0].parameters["sequence"] == "89012"

    def test_wrap_reversed(self):
        """Test that wrapping also applies to the reversed sequence."""
        rule = IllegalSequenceRule("0123456789", length=5, wrap=True, match_backwards=True)
        result = rule.validate(PasswordData("21098"))
        assert result.valid is False

    def test_password_shorter_than_window(self):
        """Test that passwords shorter than the window pass."""
        rule = IllegalSequenceRule("0123456789", length=5)
        assert rule.validate(PasswordData("1234")).valid is True

    def test_ignore_case(self):
        """Test case-insensitive matching of alphabetical sequences."""
        data = PasswordData("xABCDEx")
        assert IllegalSequenceRule(EnglishSequenceData.ALPHABETICAL).validate(data).valid is True

        result = IllegalSequenceRule(EnglishSequenceData.ALPHABETICAL, ignore_case=True).validate(data)
        assert result.details[0].parameters["sequence"] == "ABCDE"

    def test_keyboard_rows(self):
        """Test that each keyboard row is searched."""
        rule = IllegalSequenceRule(EnglishSequenceData.USQWERTY, length=4)
        result = rule.validate(PasswordData("1qwer!asdf"))
        assert [d.parameters["sequence"] for d in result.details] == ["qwer", "asdf"]

    def test_window_shorter_than_three_rejected(self):
        """Test that windows below three characters are a configuration error."""
        with pytest.raises(PolicyConfigurationError):
            IllegalSequenceRule("0123456789", length=2)

    def test_empty_sequence_rejected(self):
        """Test that empty sequences are a configuration error."""
        with pytest.raises(PolicyConfigurationError):
            SequenceData("EMPTY", ("",))
