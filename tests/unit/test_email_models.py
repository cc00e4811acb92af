"""
Unit tests for the Mailer request/response models.
"""

import json

import pytest
from pydantic import SecretStr, ValidationError

from mailer.shared.models.email import Creds, EmailRequest, EmailResponse


class TestCreds:
    """Test credential handling"""

    def test_password_is_masked_in_repr(self, sample_creds):
        assert "s3cret-pass" not in repr(sample_creds)
        assert "s3cret-pass" not in str(sample_creds)
        assert isinstance(sample_creds.pwd, SecretStr)

    def test_password_is_plaintext_on_the_wire(self, sample_creds):
        assert sample_creds.model_dump() == {"email": "noreply@example.com", "pwd": "s3cret-pass"}


class TestEmailRequest:
    """Test request construction and encoding"""

    def test_payload_matches_wire_shape(self, sample_email_request):
        payload = json.loads(sample_email_request.to_payload())

        assert list(payload.keys()) == ["creds", "to_list", "subject", "body", "html", "from_name"]
        assert payload["creds"] == {"email": "noreply@example.com", "pwd": "s3cret-pass"}
        assert payload["to_list"] == ["user@example.com", "other@example.com"]
        assert payload["html"] is True

    def test_defaults(self, sample_creds):
        request = EmailRequest(creds=sample_creds)
        payload = json.loads(request.to_payload())

        assert payload["to_list"] == []
        assert payload["subject"] == ""
        assert payload["body"] == ""
        assert payload["html"] is False
        assert payload["from_name"] == ""

    def test_recipient_order_is_preserved(self, sample_creds):
        recipients = ["c@example.com", "a@example.com", "b@example.com"]
        request = EmailRequest(creds=sample_creds, to_list=recipients)
        assert json.loads(request.to_payload())["to_list"] == recipients

    def test_addresses_are_not_validated(self, sample_creds):
        request = EmailRequest(creds=sample_creds, to_list=["not-an-address"])
        assert request.to_list == ("not-an-address",)

    def test_request_is_immutable(self, sample_email_request):
        with pytest.raises(ValidationError):
            sample_email_request.subject = "changed"

    def test_recipient_list_cannot_be_mutated(self, sample_creds):
        recipients = ["a@example.com"]
        request = EmailRequest(creds=sample_creds, to_list=recipients)
        recipients.append("b@example.com")
        assert request.to_list == ("a@example.com",)

    def test_unknown_fields_are_rejected(self, sample_creds):
        with pytest.raises(ValidationError):
            EmailRequest(creds=sample_creds, attachments=["file.pdf"])

    def test_unicode_body(self, sample_creds):
        request = EmailRequest(creds=sample_creds, subject="Grüße", body="안녕하세요")
        payload = json.loads(request.to_payload().decode("utf-8"))
        assert payload["subject"] == "Grüße"
        assert payload["body"] == "안녕하세요"


class TestEmailResponse:
    """Test response decoding"""

    def test_decode_success(self):
        response = EmailResponse.model_validate_json('{"success": true, "message": "queued"}')
        assert response.success is True
        assert response.message == "queued"

    def test_missing_fields_take_zero_values(self):
        response = EmailResponse.model_validate_json("{}")
        assert response.success is False
        assert response.message == ""

    def test_null_fields_take_zero_values(self):
        response = EmailResponse.model_validate_json('{"success": true, "message": null}')
        assert response.success is True
        assert response.message == ""

        response = EmailResponse.model_validate_json('{"success": null, "message": "x"}')
        assert response.success is False
        assert response.message == "x"

    def test_unknown_fields_are_ignored(self):
        response = EmailResponse.model_validate_json('{"success": true, "id": 42}')
        assert response.success is True

    @pytest.mark.parametrize("raw", [
        "",
        "not json",
        "[]",
        '{"success": "true"}',
        '{"success": 1}',
        '{"success": true, "message": 5}',
    ])
    def test_malformed_bodies_fail(self, raw):
        with pytest.raises(ValidationError):
            EmailResponse.model_validate_json(raw)
