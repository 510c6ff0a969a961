"""Unit tests for AppError hierarchy."""

import pytest

from errors import (
    AppError,
    EmptyAnswerError,
    ExternalApiMissingError,
    ExternalTokenMissingError,
    FormError,
    MalformedResponseError,
    MissingFieldsError,
    NetworkError,
    NotANumberError,
    ServerError,
    SubmissionError,
    SubmissionInProgressError,
    VerificationError,
    WrongAnswerError,
)


@pytest.mark.parametrize(
    "cls, parent, code",
    [
        (EmptyAnswerError, VerificationError, "empty_answer"),
        (NotANumberError, VerificationError, "not_a_number"),
        (WrongAnswerError, VerificationError, "wrong_answer"),
        (ExternalApiMissingError, VerificationError, "external_api_missing"),
        (ExternalTokenMissingError, VerificationError, "external_token_missing"),
        (MissingFieldsError, FormError, "missing_fields"),
        (SubmissionInProgressError, FormError, "submission_in_progress"),
        (NetworkError, SubmissionError, "network_error"),
        (MalformedResponseError, SubmissionError, "malformed_response"),
    ],
)
def test_error_codes_and_hierarchy(cls, parent, code):
    e = cls("boom")
    assert isinstance(e, parent)
    assert isinstance(e, AppError)
    assert e.error_code == code
    assert e.message == "boom"
    assert str(e) == "boom"


class TestServerError:
    def test_carries_status_code(self):
        e = ServerError("Username taken", status_code=409)
        assert e.status_code == 409
        assert e.error_code == "server_error"

    def test_to_dict_includes_status(self):
        assert ServerError("nope", status_code=500).to_dict() == {
            "error": "nope",
            "code": "server_error",
            "status_code": 500,
        }


class TestAppErrorToDict:
    def test_basic(self):
        e = WrongAnswerError("wrong")
        assert e.to_dict() == {"error": "wrong", "code": "wrong_answer"}

    @pytest.mark.parametrize(
        "kwargs, key, value",
        [
            ({"field": "math_answer"}, "field", "math_answer"),
            ({"details": {"min": 1, "max": 10}}, "details", {"min": 1, "max": 10}),
        ],
        ids=["with_field", "with_details"],
    )
    def test_optional_key_present(self, kwargs, key, value):
        e = NotANumberError("invalid", **kwargs)
        assert e.to_dict()[key] == value

    def test_no_optional_keys_when_absent(self):
        d = EmptyAnswerError("missing").to_dict()
        assert "field" not in d
        assert "details" not in d
