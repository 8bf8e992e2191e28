"""
Tests for SWIFT/BIC normalization and structural validation.
"""

from __future__ import annotations

import pytest

from canonical import SwiftViolation
from canonical.layout import MAX_LENGTH, MIN_LENGTH
from swiftcode.normalizer import normalize
from swiftcode.validator import is_valid, validate


class TestNormalize:
    """Tests for normalize()."""

    def test_none_becomes_empty_string(self) -> None:
        """Test that None input normalizes to an empty string."""
        assert normalize(None) == ""

    def test_empty_string(self) -> None:
        """Test that empty input stays empty."""
        assert normalize("") == ""

    def test_uppercases(self) -> None:
        """Test that lowercase input is uppercased."""
        assert normalize("deutdeff") == "DEUTDEFF"

    def test_strips_noise_anywhere(self) -> None:
        """Test that spaces, tabs, newlines, carriage returns and hyphens are removed everywhere."""
        assert normalize(" deut-de\tff\r\n500 ") == "DEUTDEFF500"

    @pytest.mark.parametrize(
        "raw",
        ["AAAA-BB-CC-123", "AAAA BB CC 123", "aaaa bb-cc\t123", "\nAAAABBCC123\n"],
    )
    def test_formatting_variants_are_equivalent(self, raw: str) -> None:
        """Test that human-formatted variants normalize to the compact form."""
        assert normalize(raw) == "AAAABBCC123"

    def test_other_punctuation_is_kept(self) -> None:
        """Test that only the listed noise characters are stripped."""
        assert normalize("DEUT.DEFF") == "DEUT.DEFF"


class TestValidate:
    """Tests for validate()."""

    def test_valid_bic8(self) -> None:
        """Test validation of an 8-character code."""
        assert validate("DEUTDEFF") == ()
        assert is_valid("DEUTDEFF") is True

    def test_valid_bic11(self) -> None:
        """Test validation of an 11-character code."""
        assert validate("DEUTDEFF500") == ()

    def test_numeric_location_and_branch(self) -> None:
        """Test that location and branch codes may contain digits."""
        assert validate("HSBCGB2L") == ()
        assert validate("BOFAUS3N123") == ()

    def test_too_short(self) -> None:
        """Test that a 2-character code is too short and badly formatted."""
        assert validate("AB") == (SwiftViolation.TOO_SHORT, SwiftViolation.BAD_FORMAT)

    def test_too_long(self) -> None:
        """Test that a 21-character code is too long and badly formatted."""
        assert validate("THISISAWAYTOOLONGCODE") == (SwiftViolation.TOO_LONG, SwiftViolation.BAD_FORMAT)

    def test_empty_string_reports_every_rule(self) -> None:
        """Test that an empty code breaks the length, charset and format rules."""
        assert validate("") == (
            SwiftViolation.TOO_SHORT,
            SwiftViolation.BAD_CHARS,
            SwiftViolation.BAD_FORMAT,
        )

    def test_bad_chars(self) -> None:
        """Test that punctuation is reported as bad characters."""
        assert validate("DEUTDE.F") == (SwiftViolation.BAD_CHARS, SwiftViolation.BAD_FORMAT)

    def test_all_rules_run_and_keep_order(self) -> None:
        """Test that every rule runs and violations keep rule order."""
        assert validate("AB$") == (
            SwiftViolation.TOO_SHORT,
            SwiftViolation.BAD_CHARS,
            SwiftViolation.BAD_FORMAT,
        )
        assert validate("DEUTDEFF500_EXTRA") == (
            SwiftViolation.TOO_LONG,
            SwiftViolation.BAD_CHARS,
            SwiftViolation.BAD_FORMAT,
        )

    def test_digit_in_bank_code_is_bad_format_only(self) -> None:
        """Test that a digit in the bank code only breaks the format rule."""
        assert validate("DEU1DEFF") == (SwiftViolation.BAD_FORMAT,)

    def test_digit_in_country_code_is_bad_format_only(self) -> None:
        """Test that a digit in the country code only breaks the format rule."""
        assert validate("DEUTD1FF") == (SwiftViolation.BAD_FORMAT,)

    def test_nine_and_ten_chars_are_bad_format(self) -> None:
        """Test that a branch code must be exactly three characters when present."""
        assert validate("DEUTDEFF5") == (SwiftViolation.BAD_FORMAT,)
        assert validate("DEUTDEFF50") == (SwiftViolation.BAD_FORMAT,)

    def test_lowercase_is_rejected_before_normalization(self) -> None:
        """Test that validate() itself does not uppercase."""
        assert SwiftViolation.BAD_CHARS in validate("deutdeff")

    @pytest.mark.parametrize("length", range(0, MIN_LENGTH))
    def test_short_lengths_flag_too_short(self, length: int) -> None:
        """Test that every length below the minimum is too short."""
        assert SwiftViolation.TOO_SHORT in validate("A" * length)

    @pytest.mark.parametrize("length", range(MAX_LENGTH + 1, MAX_LENGTH + 6))
    def test_long_lengths_flag_too_long(self, length: int) -> None:
        """Test that every length above the maximum is too long."""
        assert SwiftViolation.TOO_LONG in validate("A" * length)

    def test_trailing_newline_is_not_accepted(self) -> None:
        """Test that a trailing newline is not matched by the format rule."""
        assert validate("DEUTDEFF\n") == (SwiftViolation.BAD_CHARS, SwiftViolation.BAD_FORMAT)


class TestNormalizeThenValidate:
    """Tests for the normalize -> validate combination."""

    @pytest.mark.parametrize("raw", ["deutdeff", "Deut-De-Ff-500", "hsbc gb 2l"])
    def test_lowercase_never_causes_bad_chars(self, raw: str) -> None:
        """Test that lowercase input never breaks the charset rule after normalization."""
        assert SwiftViolation.BAD_CHARS not in validate(normalize(raw))

    def test_formatted_and_compact_have_same_outcome(self) -> None:
        """Test that formatted and compact forms validate the same way."""
        assert validate(normalize("AAAA-BB-CC-123")) == validate(normalize("AAAABBCC123")) == ()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
