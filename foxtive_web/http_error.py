"""HTTP-level errors and the JSON responses they turn into."""

from __future__ import annotations

import logging
from http import HTTPStatus

from foxtive_web import responder
from foxtive_web.errors import ErrorKind, MultipartError, ValidationError
from foxtive_web.responder import Response
from foxtive_web.response_code import ResponseCode

logger = logging.getLogger(__name__)

_UNSUPPORTED_MEDIA_KINDS = frozenset(
    {ErrorKind.INVALID_FILE_EXTENSION, ErrorKind.INVALID_CONTENT_TYPE}
)


class HttpError(Exception):
    """An error raised while handling a request.

    A plain ``HttpError`` stands for an unexpected failure: it answers with
    500 and hides its details from the client. Subclasses pick their own
    status and response. Subclasses that set ``expose_message`` send their
    message to the client under their own status.
    """

    expose_message: bool = False

    def status_code(self) -> HTTPStatus:
        """Return the HTTP status this error answers with."""
        return HTTPStatus.INTERNAL_SERVER_ERROR

    def error_response(self) -> Response:
        """Return the JSON response sent to the client for this error."""
        return make_http_error_response(self)


class PayloadError(HttpError):
    """The request body could not be read."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Payload Error: {detail}")

    def status_code(self) -> HTTPStatus:
        return HTTPStatus.BAD_REQUEST


class Utf8Error(HttpError):
    """The request body was not valid UTF-8."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Utf8 Error: {detail}")


class MultipartUploadError(HttpError):
    """A multipart upload could not be read or failed validation."""

    def __init__(self, error: MultipartError) -> None:
        self.error = error
        super().__init__(f"Multipart Error: {error}")

    def status_code(self) -> HTTPStatus:
        if (
            isinstance(self.error, ValidationError)
            and self.error.error.kind in _UNSUPPORTED_MEDIA_KINDS
        ):
            return HTTPStatus.UNSUPPORTED_MEDIA_TYPE
        return HTTPStatus.BAD_REQUEST


def make_http_error_response(err: HttpError) -> Response:
    """Build the JSON response for ``err``."""
    if isinstance(err, PayloadError):
        logger.error("Payload Error: %s", err.detail)
        return responder.send_msg(err.detail, ResponseCode.BAD_REQUEST, "Payload Error")
    if isinstance(err, MultipartUploadError):
        logger.error("Multipart Error: %s", err.error)
        return responder.send_msg(
            str(err.error), ResponseCode.BAD_REQUEST, "File Upload Error"
        )
    if err.expose_message:
        logger.info("%s", err)
        return responder.message(str(err), ResponseCode.from_status(err.status_code()))
    logger.error("Error: %s", err)
    return responder.internal_server_error()