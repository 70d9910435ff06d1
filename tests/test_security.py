"""Unit tests for caller subject extraction."""

import pytest

from pixelgallery.core.exceptions import MalformedCredentialError, MissingCredentialError
from pixelgallery.core.security import extract_subject


class TestExtractSubject:
    """Tests for extract_subject."""

    def test_valid_header_returns_subject(self):
        assert extract_subject("Bearer sub:user1", scheme="Bearer", prefix="sub:") == "user1"

    def test_subject_is_opaque(self):
        assert extract_subject("Bearer sub:auth0|abc:def", scheme="Bearer", prefix="sub:") == "auth0|abc:def"

    def test_missing_header(self):
        with pytest.raises(MissingCredentialError) as exc_info:
            extract_subject(None, scheme="Bearer", prefix="sub:")

        assert exc_info.value.to_payload()["code"] == "no auth header"

    @pytest.mark.parametrize(
        "header",
        [
            "",
            "Bearer",
            "Bearer ",
            "Basic sub:user1",
            "bearer sub:user1",
            "Bearer user1",
            "Bearer sub:",
        ],
    )
    def test_malformed_header(self, header):
        with pytest.raises(MalformedCredentialError) as exc_info:
            extract_subject(header, scheme="Bearer", prefix="sub:")

        assert exc_info.value.status_code == 401
        assert exc_info.value.to_payload()["code"] == "invalid_header"

    def test_custom_scheme_and_prefix(self):
        assert extract_subject("Token id=42", scheme="Token", prefix="id=") == "42"
