"""A request body read as raw JSON text."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, TypeVar

from foxtive_web.http_error import HttpError, Utf8Error

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonBodyError(HttpError):
    """The JSON body did not match what the handler expects."""

    expose_message = True

    def status_code(self) -> HTTPStatus:
        return HTTPStatus.BAD_REQUEST


@dataclass
class JsonBody:
    """The raw JSON text of a request body."""

    json: str

    @classmethod
    def from_bytes(cls, data: bytes) -> JsonBody:
        """Decode a body as UTF-8; raise Utf8Error if it is not valid."""
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise Utf8Error(str(err)) from err
        logger.debug("[json-body] %s", raw)
        return cls(json=raw)

    def raw(self) -> str:
        """Return the body text unchanged."""
        return self.json

    def deserialize(self, factory: Callable[[Any], T]) -> T:
        """Decode the body and build a value with ``factory``.

        Invalid JSON, or a TypeError, ValueError or KeyError raised by
        ``factory``, becomes a JsonBodyError carrying the original message.
        """
        try:
            return factory(json.loads(self.json))
        except (TypeError, ValueError, KeyError) as err:
            logger.error("Error deserializing JSON: %r", err)
            raise JsonBodyError(str(err)) from err

    def json_value(self) -> Any:
        """Decode the body; invalid JSON raises ``json.JSONDecodeError``."""
        return json.loads(self.json)