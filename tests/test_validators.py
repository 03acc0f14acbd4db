"""Tests for configuration validators."""

import pytest

from sessionboot.config.validators import (
    validate_decimal_mark,
    validate_index_url,
    validate_log_level,
    validate_non_empty_string,
    validate_positive_integer,
)


class TestValidateIndexUrl:
    """Tests for validate_index_url function."""

    def test_valid_urls(self):
        """Test HTTP and HTTPS indexes pass, trimmed."""
        assert validate_index_url("https://pypi.org/simple") == "https://pypi.org/simple"
        assert validate_index_url(" http://localhost:3141/root/pypi ") == (
            "http://localhost:3141/root/pypi"
        )

    def test_non_http_scheme_fails(self):
        """Test scheme-less and file URLs are rejected."""
        with pytest.raises(ValueError, match=r"must be an http\(s\) index URL"):
            validate_index_url("pypi.org/simple")
        with pytest.raises(ValueError, match=r"must be an http\(s\) index URL"):
            validate_index_url("file:///srv/wheels")

    def test_missing_host_fails(self):
        with pytest.raises(ValueError, match="has no host"):
            validate_index_url("https:///simple")

    def test_empty_url_fails(self):
        """Test empty, blank and None URLs fail."""
        for value in ("", "   ", None):
            with pytest.raises(ValueError, match="repository_url is required"):
                validate_index_url(value, field_name="repository_url")


class TestValidatePositiveInteger:
    """Tests for validate_positive_integer function."""

    def test_valid_values(self):
        assert validate_positive_integer(1) == 1
        assert validate_positive_integer("8") == 8

    def test_zero_and_negative_fail(self):
        with pytest.raises(ValueError, match="must be at least 1, got 0"):
            validate_positive_integer(0)
        with pytest.raises(ValueError, match="must be at least 1, got -2"):
            validate_positive_integer(-2)

    def test_non_integer_fails(self):
        """Test strings, None and booleans are rejected."""
        with pytest.raises(ValueError, match="install_workers must be a whole number"):
            validate_positive_integer("many", field_name="install_workers")
        with pytest.raises(ValueError, match="must be a whole number"):
            validate_positive_integer(None)
        with pytest.raises(ValueError, match="not a boolean"):
            validate_positive_integer(True)


class TestValidateLogLevel:
    """Tests for validate_log_level function."""

    def test_normalized(self):
        assert validate_log_level("info") == "INFO"
        assert validate_log_level(" Warning ") == "WARNING"

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid log level: VERBOSE"):
            validate_log_level("verbose")


class TestValidateNonEmptyString:
    """Tests for validate_non_empty_string function."""

    def test_stripped(self):
        assert validate_non_empty_string("  pip ") == "pip"

    def test_blank(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_non_empty_string("   ")

    def test_non_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            validate_non_empty_string(3)
        with pytest.raises(ValueError, match="must be a string"):
            validate_non_empty_string(None)


class TestValidateDecimalMark:
    """Tests for validate_decimal_mark function."""

    @pytest.mark.parametrize("mark", [".", ","])
    def test_valid(self, mark):
        assert validate_decimal_mark(mark) == mark

    @pytest.mark.parametrize("mark", ["", "..", "1", "a", None])
    def test_invalid(self, mark):
        with pytest.raises(ValueError, match="Invalid decimal mark"):
            validate_decimal_mark(mark)
