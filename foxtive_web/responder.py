"""Building JSON HTTP responses in the standard envelope."""

from __future__ import annotations

import dataclasses
import datetime
import json
import uuid
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from foxtive_web.json_message import JsonResponse, make_json_message
from foxtive_web.response_code import ResponseCode


@dataclass
class Response:
    """A finished HTTP response: status, headers and encoded body."""

    status: HTTPStatus
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body.decode("utf-8"))


def _encode(value: Any) -> Any:
    if isinstance(value, JsonResponse):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def respond(data: Any, status: int) -> Response:
    """Send ``data`` as JSON without the standard envelope."""
    body = json.dumps(data, default=_encode, ensure_ascii=False).encode("utf-8")
    return Response(
        status=HTTPStatus(status),
        headers={"Content-Type": "application/json"},
        body=body,
    )


def send_msg(data: Any, code: ResponseCode, msg: str) -> Response:
    """Send ``data`` in the envelope with ``code`` and message ``msg``."""
    return respond(make_json_message(data, code.code(), code.success(), msg), code.status())


def send(data: Any, code: ResponseCode) -> Response:
    """Send ``data`` in the envelope with ``code`` and no message."""
    return respond(make_json_message(data, code.code(), code.success(), None), code.status())


def message(msg: str, code: ResponseCode) -> Response:
    """Send only a message, with empty data, under ``code``."""
    return respond(make_json_message({}, code.code(), code.success(), msg), code.status())


def ok_message(msg: str) -> Response:
    return message(msg, ResponseCode.OK)


def success_message(msg: str) -> Response:
    return ok_message(msg)


def bad_req_message(msg: str) -> Response:
    return message(msg, ResponseCode.BAD_REQUEST)


def warning_message(msg: str) -> Response:
    return bad_req_message(msg)


def not_found_message(msg: str) -> Response:
    return message(msg, ResponseCode.NOT_FOUND)


def entity_not_found_message(entity: str) -> Response:
    return not_found_message(f"Such {entity} does not exists")


def internal_server_error_message(msg: str) -> Response:
    return message(msg, ResponseCode.INTERNAL_SERVER_ERROR)


def not_found() -> Response:
    return not_found_message("Not Found")


def internal_server_error() -> Response:
    return internal_server_error_message("Internal Server Error")


def redirect(url: str) -> Response:
    """Return a 302 response pointing at ``url``."""
    return Response(status=HTTPStatus.FOUND, headers={"Location": url})