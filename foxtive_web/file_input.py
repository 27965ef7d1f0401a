"""Uploaded files collected from a multipart body."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from foxtive_web import errors
from foxtive_web.content_disposition import ContentDisposition
from foxtive_web.errors import InvalidContentDispositionError, NoContentTypeError
from foxtive_web.validator import FileRules, Validator


def _content_type(headers: Mapping[str, str | bytes]) -> str:
    for key, value in headers.items():
        if key.lower() != "content-type":
            continue
        if isinstance(value, bytes):
            try:
                return value.decode("ascii")
            except UnicodeDecodeError as err:
                raise NoContentTypeError(str(err)) from err
        return value
    raise NoContentTypeError("Empty content type")


@dataclass
class FileInput:
    """One uploaded file: its metadata and the chunks of its content."""

    file_name: str = ""
    field_name: str = ""
    size: int = 0
    content_type: str = ""
    chunks: list[bytes] = field(default_factory=list)
    extension: str | None = None
    content_disposition: ContentDisposition = field(default_factory=ContentDisposition)

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str | bytes],
        content_disposition: ContentDisposition,
    ) -> FileInput:
        """Build an empty file entry from a part's headers and disposition."""
        content_type = _content_type(headers)
        field_name = content_disposition.name()
        file_name = content_disposition.filename()
        if field_name is None:
            raise InvalidContentDispositionError("missing 'name' parameter")
        if file_name is None:
            raise InvalidContentDispositionError("missing 'filename' parameter")
        return cls(
            file_name=file_name,
            field_name=field_name,
            content_type=content_type,
            extension=file_name.split(".")[-1],
            content_disposition=content_disposition,
        )

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the file's content to ``path``, replacing any existing file."""
        with open(path, "wb") as handle:
            handle.writelines(self.chunks)

    def validate(self, rules: FileRules) -> None:
        """Check this file alone against ``rules``; raise ValidationError on failure."""
        Validator().add_rule(self.field_name, rules).validate({self.field_name: [self]})

    def calculate_size(self) -> int:
        """Return the total length of the collected chunks."""
        return sum(len(chunk) for chunk in self.chunks)

    def human_size(self) -> str:
        """Return the collected size in a readable form such as ``"1.20 MB"``."""
        return self.format_size(self.calculate_size())

    @staticmethod
    def format_size(size_in_bytes: int) -> str:
        """Render a byte count as e.g. ``"300 KB"`` or ``"12 bytes"``."""
        return errors.format_size(size_in_bytes)