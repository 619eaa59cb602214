"""Tests for profile name validation."""

import pytest

from ..errors import ProfileValidationError
from ..validation import require_valid_name, validate_profile_name


class TestValidateProfileName:
    """Test cases for validate_profile_name."""

    @pytest.mark.parametrize("name", ["default", "work", "Work_2", "team-a", "a", "X-1_y"])
    def test_valid_names(self, name):
        """Test that safe names are accepted."""
        result = validate_profile_name(name)
        assert result.valid
        assert result.error is None

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_empty(self, name):
        """Test empty and whitespace-only names."""
        result = validate_profile_name(name)
        assert not result.valid
        assert result.error == "Profile name cannot be empty"

    @pytest.mark.parametrize("name", [" work", "work ", " work "])
    def test_surrounding_whitespace(self, name):
        """Test names with leading or trailing whitespace."""
        result = validate_profile_name(name)
        assert result.error == "Profile name cannot contain leading or trailing spaces"

    @pytest.mark.parametrize("name", ["help", "version", "HELP", "Version"])
    def test_reserved(self, name):
        """Test reserved words, case-insensitively."""
        result = validate_profile_name(name)
        assert result.error == f'Profile name "{name}" is reserved. Choose a different name.'

    @pytest.mark.parametrize("name", ["..", "a..b", "a/b", "a\\b", "../etc"])
    def test_traversal(self, name):
        """Test path traversal tokens."""
        result = validate_profile_name(name)
        assert result.error == 'Profile name cannot contain "..", "/", or "\\"'

    @pytest.mark.parametrize("name", ["a b", "work.1", "café", "a:b", "name\n"])
    def test_charset(self, name):
        """Test characters outside the safe set."""
        result = validate_profile_name(name)
        assert not result.valid
        if name == "name\n":
            assert result.error == "Profile name cannot contain leading or trailing spaces"
        else:
            assert result.error == (
                "Profile name can only contain letters, numbers, hyphens, and underscores"
            )

    def test_first_violation_wins(self):
        """Test that checks are reported in a fixed order."""
        assert validate_profile_name(" ../x").error == (
            "Profile name cannot contain leading or trailing spaces"
        )
        assert validate_profile_name("a/b c").error == (
            'Profile name cannot contain "..", "/", or "\\"'
        )


class TestRequireValidName:
    """Test cases for require_valid_name."""

    def test_returns_name(self):
        """Test that a valid name is returned unchanged."""
        assert require_valid_name("work") == "work"

    def test_raises_reason(self):
        """Test that the reason is the exception message."""
        with pytest.raises(ProfileValidationError, match="cannot be empty"):
            require_valid_name("")

    def test_label_prefix(self):
        """Test the labelled message used by rename."""
        with pytest.raises(ProfileValidationError) as exc_info:
            require_valid_name("a/b", "new")
        assert str(exc_info.value) == (
            'Invalid new profile name: Profile name cannot contain "..", "/", or "\\"'
        )
