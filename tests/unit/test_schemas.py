"""
Unit Tests for Shared Schemas

These tests verify that:
- ApiResult is truthy on success and falsy on failure
- Credential is immutable and keeps its secret out of repr()

Run with:
    pytest tests/unit/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError

from core.schemas import ApiError, ApiResult, Credential


class TestApiResult:
    """Tests for ApiResult"""

    def test_success_is_truthy(self):
        result = ApiResult.success({"status": 0, "data": 1})
        assert result
        assert result.ok
        assert result.error is None
        assert result.data == {"status": 0, "data": 1}

    def test_success_with_empty_payload_is_still_truthy(self):
        """Truthiness reflects the outcome, not the payload"""
        assert ApiResult.success([])
        assert ApiResult.success(None)

    def test_failure_is_falsy(self):
        result = ApiResult.failure(400, "Bad Request")
        assert not result
        assert result.data is None
        assert result.error == ApiError(code=400, message="Bad Request")

    def test_failure_accepts_string_codes(self):
        """Transport faults use the exception name as code"""
        assert ApiResult.failure("ReadTimeout", "timed out").error.code == "ReadTimeout"


class TestCredential:
    """Tests for Credential"""

    def test_frozen(self):
        credential = Credential(key="k", secret="s")
        with pytest.raises(ValidationError):
            credential.key = "other"

    def test_secret_not_in_repr(self):
        credential = Credential(key="k", secret="super-secret")
        assert "super-secret" not in repr(credential)

    def test_is_complete(self):
        assert Credential(key="k", secret="s").is_complete
        assert not Credential(key="k").is_complete

    def test_optional_fields_default_to_none(self):
        credential = Credential()
        assert credential.cert_pem_path is None
        assert credential.timeout is None
