"""Application response codes and their HTTP statuses."""

from __future__ import annotations

import enum
from http import HTTPStatus


class ResponseCode(enum.Enum):
    """A response code sent in JSON bodies, tied to one HTTP status."""

    OK = "000"
    CREATED = "001"
    ACCEPTED = "002"
    NO_CONTENT = "003"
    BAD_REQUEST = "004"
    UNAUTHORIZED = "005"
    PAYMENT_REQUIRED = "006"
    FORBIDDEN = "007"
    NOT_FOUND = "008"
    CONFLICT = "009"
    INTERNAL_SERVER_ERROR = "010"
    SERVICE_UNAVAILABLE = "011"
    NOT_IMPLEMENTED = "012"

    def code(self) -> str:
        """Return the three-digit application code."""
        return self.value

    def status(self) -> HTTPStatus:
        """Return the HTTP status this code responds with."""
        return _STATUS_BY_CODE[self]

    def success(self) -> bool:
        """True when the HTTP status is in the 2xx range."""
        return 200 <= self.status() < 300

    @classmethod
    def from_code(cls, code: str) -> ResponseCode:
        """Look up a code by its three-digit string; raise ValueError if unknown."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError("Invalid response code") from None

    @classmethod
    def from_status(cls, status: int) -> ResponseCode:
        """Look up a code by HTTP status; raise ValueError if unmapped."""
        try:
            return _CODE_BY_STATUS[int(status)]
        except KeyError:
            raise ValueError("Invalid status code") from None


_STATUS_BY_CODE: dict[ResponseCode, HTTPStatus] = {
    ResponseCode.OK: HTTPStatus.OK,
    ResponseCode.CREATED: HTTPStatus.CREATED,
    ResponseCode.ACCEPTED: HTTPStatus.ACCEPTED,
    ResponseCode.NO_CONTENT: HTTPStatus.NO_CONTENT,
    ResponseCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ResponseCode.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ResponseCode.PAYMENT_REQUIRED: HTTPStatus.PAYMENT_REQUIRED,
    ResponseCode.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ResponseCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ResponseCode.CONFLICT: HTTPStatus.CONFLICT,
    ResponseCode.INTERNAL_SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    ResponseCode.SERVICE_UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
    ResponseCode.NOT_IMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
}

_CODE_BY_STATUS: dict[int, ResponseCode] = {
    int(status): code for code, status in _STATUS_BY_CODE.items()
}