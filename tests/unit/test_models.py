"""Unit tests for data models."""

import dataclasses

import pytest

from typora_upload.errors import ApplicationError, FileError
from typora_upload.models import ApiResponse, UploaderConfig, UploadResult


class TestUploaderConfig:
    """UploaderConfig behaviour"""

    def test_password_hidden_from_repr(self):
        config = UploaderConfig("https://img.test", "alice", "hunter2")
        assert "hunter2" not in repr(config)
        assert "alice" in repr(config)

    def test_is_immutable(self):
        config = UploaderConfig("https://img.test", "alice", "hunter2")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.password = "other"


class TestUploadResult:
    """UploadResult behaviour"""

    def test_success(self):
        result = UploadResult(file_path="a.png", image_url="https://x/a.png")
        assert result.success

    def test_failure(self):
        result = UploadResult(file_path="a.png", error=FileError("failed to open image"))
        assert not result.success
        assert result.image_url is None


class TestApiResponse:
    """Decoding of the image host JSON body"""

    def test_from_dict(self):
        response = ApiResponse.from_dict(
            {"status": 200, "code": 1, "msg": "ok", "data": "http://x/y.png"}
        )
        assert response == ApiResponse(200, 1, "ok", "http://x/y.png")
        assert response.is_success

    def test_missing_fields_take_zero_values(self):
        response = ApiResponse.from_dict({"msg": "nope"})
        assert response == ApiResponse(0, 0, "nope", "")
        assert not response.is_success

    def test_null_fields_take_zero_values(self):
        assert ApiResponse.from_dict({"status": None, "data": None}).data == ""

    def test_null_body_is_all_zero(self):
        response = ApiResponse.from_dict(None)
        assert response == ApiResponse(0, 0, "", "")
        assert not response.is_success

    @pytest.mark.parametrize(
        "payload",
        [
            [1, 2, 3],
            "string",
            {"status": "200"},
            {"code": True},
            {"data": 42},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValueError):
            ApiResponse.from_dict(payload)

    def test_code_zero_is_rejection(self):
        assert not ApiResponse(200, 0, "quota exceeded", "").is_success

    def test_status_not_200_is_rejection(self):
        assert not ApiResponse(500, 1, "boom", "http://x").is_success


def test_application_error_keeps_server_message():
    error = ApplicationError("quota exceeded", status=200, code=0)
    assert error.message == "quota exceeded"
    assert "quota exceeded" in str(error)
    assert error.code == 0
