"""Tests for the exception hierarchy."""

import pytest

from frontmatter_core import (
    DocumentTooLargeError,
    FrontMatterError,
    InvalidConfigError,
    MalformedFrontMatterError,
    UnknownConventionError,
)

ALL_ERRORS = [
    InvalidConfigError,
    UnknownConventionError,
    MalformedFrontMatterError,
    DocumentTooLargeError,
]


class TestExceptionHierarchy:
    @pytest.mark.parametrize("error", ALL_ERRORS)
    def test_is_front_matter_error(self, error):
        assert issubclass(error, FrontMatterError)

    def test_front_matter_error_is_exception(self):
        assert issubclass(FrontMatterError, Exception)

    def test_invalid_config_is_value_error(self):
        assert issubclass(InvalidConfigError, ValueError)

    def test_unknown_convention_is_lookup_error(self):
        assert issubclass(UnknownConventionError, LookupError)

    def test_malformed_front_matter_is_value_error(self):
        assert issubclass(MalformedFrontMatterError, ValueError)

    def test_document_too_large_is_value_error(self):
        assert issubclass(DocumentTooLargeError, ValueError)

    @pytest.mark.parametrize("error", ALL_ERRORS)
    def test_message(self, error):
        assert str(error("details")) == "details"

    @pytest.mark.parametrize("error", ALL_ERRORS)
    def test_catch_front_matter_error(self, error):
        with pytest.raises(FrontMatterError):
            raise error("test")
