"""Reading ``multipart/form-data`` request bodies into form fields and files."""

from __future__ import annotations

import os
from collections.abc import Iterator

from foxtive_web.content_disposition import ContentDisposition, parse_parameters
from foxtive_web.data_input import DataInput
from foxtive_web.errors import MalformedMultipartError, MissingDataFieldError
from foxtive_web.file_input import FileInput
from foxtive_web.validator import Validator

_CRLF = b"\r\n"


def _boundary(content_type: str | None) -> bytes:
    if not content_type:
        raise MalformedMultipartError("No Content-Type header found")
    mime = content_type.partition(";")[0].strip().lower()
    if not mime.startswith("multipart/"):
        raise MalformedMultipartError("Can not parse Content-Type header")
    boundary = parse_parameters(content_type).get("boundary")
    if not boundary:
        raise MalformedMultipartError("Multipart boundary is not found")
    return boundary.encode("latin-1")


def _split_parts(body: bytes, boundary: bytes) -> Iterator[bytes]:
    delimiter = b"--" + boundary
    start = body.find(delimiter)
    if start < 0:
        raise MalformedMultipartError("Multipart stream is incomplete")
    pos = start + len(delimiter)
    while True:
        if body.startswith(b"--", pos):
            return
        line_end = body.find(_CRLF, pos)
        if line_end < 0:
            raise MalformedMultipartError("Multipart stream is incomplete")
        pos = line_end + len(_CRLF)
        following = body.find(_CRLF + delimiter, pos)
        if following < 0:
            raise MalformedMultipartError("Multipart stream is incomplete")
        yield body[pos:following]
        pos = following + len(_CRLF) + len(delimiter)


def _split_part(part: bytes) -> tuple[dict[str, bytes], bytes]:
    if part.startswith(_CRLF):
        head, content = b"", part[len(_CRLF):]
    else:
        head, sep, content = part.partition(_CRLF + _CRLF)
        if not sep:
            raise MalformedMultipartError("Can not parse part headers")
    headers: dict[str, bytes] = {}
    for line in head.split(_CRLF):
        if not line:
            continue
        name, colon, value = line.partition(b":")
        if not colon:
            raise MalformedMultipartError("Can not parse part headers")
        headers[name.decode("latin-1").strip().lower()] = value.strip()
    return headers, content


class Multipart:
    """The form fields and files of one multipart request body.

    Nothing is read until :meth:`process` (or :meth:`validate`) is called;
    the body is consumed once, later calls find nothing new.
    """

    def __init__(self, content_type: str | None = None, body: bytes = b"") -> None:
        self._content_type = content_type
        self._body = body
        self._consumed = False
        self._files: dict[str, list[FileInput]] = {}
        self._data: dict[str, list[DataInput]] = {}

    def _parts(self) -> Iterator[tuple[dict[str, bytes], bytes]]:
        if self._consumed:
            return
        self._consumed = True
        boundary = _boundary(self._content_type)
        for part in _split_parts(self._body, boundary):
            yield _split_part(part)

    def process(self) -> Multipart:
        """Read the body, collecting plain fields and files per field name."""
        for headers, content in self._parts():
            raw_disposition = headers.get("content-disposition")
            if raw_disposition is None:
                continue
            try:
                disposition_text = raw_disposition.decode("ascii")
            except UnicodeDecodeError:
                continue
            disposition = ContentDisposition.parse(disposition_text)
            if not disposition.has_name_field:
                continue

            if not disposition.is_file_field:
                field_name = disposition.name() or ""
                value = content.decode("utf-8", errors="replace")
                self._data.setdefault(field_name, []).append(
                    DataInput(name=field_name, value=value)
                )
                continue

            info = FileInput.from_headers(headers, disposition)
            info.chunks = [content] if content else []
            info.size = len(content)
            self._files.setdefault(info.field_name, []).append(info)
        return self

    @staticmethod
    def save_file(file_input: FileInput, path: str | os.PathLike[str]) -> None:
        """Write ``file_input``'s content to ``path``."""
        file_input.save(path)

    def all_data(self) -> dict[str, list[DataInput]]:
        """Return every plain field, keyed by field name."""
        return self._data

    def data(self, field: str) -> list[DataInput] | None:
        """Return the values submitted for ``field``, or None."""
        return self._data.get(field)

    def first_data(self, field: str) -> DataInput | None:
        """Return the first value submitted for ``field``, or None."""
        values = self._data.get(field)
        return values[0] if values else None

    def first_data_required(self, field: str) -> DataInput:
        """Return the first value for ``field``; raise MissingDataFieldError if absent."""
        value = self.first_data(field)
        if value is None:
            raise MissingDataFieldError(field)
        return value

    def all_files(self) -> dict[str, list[FileInput]]:
        """Return every uploaded file, keyed by field name."""
        return self._files

    def files(self, field: str) -> list[FileInput] | None:
        """Return the files uploaded for ``field``, or None."""
        return self._files.get(field)

    def first_file(self, field: str) -> FileInput | None:
        """Return the first file uploaded for ``field``, or None."""
        files = self._files.get(field)
        return files[0] if files else None

    def has_file(self, field: str) -> bool:
        """True when any file was uploaded for ``field``."""
        return field in self._files

    def validate(self, validator: Validator) -> Multipart:
        """Process the body, then check its files against ``validator``."""
        self.process()
        validator.validate(self._files)
        return self