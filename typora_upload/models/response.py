"""Image host API response data model."""

from __future__ import annotations

from dataclasses import dataclass


def _int_field(payload: dict[str, object], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid status or code
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str_field(payload: dict[str, object], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ApiResponse:
    """Decoded JSON body returned by the image host."""

    status: int
    code: int
    msg: str
    data: str

    @classmethod
    def from_dict(cls, payload: object) -> ApiResponse:
        """Build a response from a decoded JSON value.

        Missing or null fields take their zero value, and a null body
        decodes to an all-zero response.

        Args:
            payload: Value produced by ``json.loads``

        Returns:
            The decoded response

        Raises:
            ValueError: If the payload is not an object or a field has the wrong type
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        return cls(
            status=_int_field(payload, "status"),
            code=_int_field(payload, "code"),
            msg=_str_field(payload, "msg"),
            data=_str_field(payload, "data"),
        )

    @property
    def is_success(self) -> bool:
        """Whether the server accepted the upload."""
        return self.status == 200 and self.code == 1
