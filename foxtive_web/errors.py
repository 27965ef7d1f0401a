"""Errors raised while reading and validating multipart uploads."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_KILOBYTE = 1024
_MEGABYTE = _KILOBYTE * 1024
_GIGABYTE = _MEGABYTE * 1024


def format_size(size_in_bytes: int) -> str:
    """Render a byte count as e.g. ``"1.50 MB"`` or ``"300 bytes"``."""
    if size_in_bytes >= _GIGABYTE:
        return f"{size_in_bytes / _GIGABYTE:.2f} GB"
    if size_in_bytes >= _MEGABYTE:
        return f"{size_in_bytes / _MEGABYTE:.2f} MB"
    if size_in_bytes >= _KILOBYTE:
        return f"{size_in_bytes / _KILOBYTE:.2f} KB"
    return f"{size_in_bytes} bytes"


class ErrorKind(enum.Enum):
    """The reasons an uploaded field can fail validation."""

    NO_FILES = "no_files"
    FILE_TOO_SMALL = "file_too_small"
    FILE_TOO_LARGE = "file_too_large"
    TOO_FEW_FILES = "too_few_files"
    TOO_MANY_FILES = "too_many_files"
    INVALID_FILE_EXTENSION = "invalid_file_extension"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    MISSING_FILE_EXTENSION = "missing_file_extension"


@dataclass(frozen=True)
class ErrorMessage:
    """A validation failure kind together with its detail.

    ``value`` holds a size limit, a file count, an extension (possibly None),
    a content-type description or a file name, depending on ``kind``.
    """

    kind: ErrorKind
    value: int | str | None = None


@dataclass(frozen=True)
class InputError:
    """A validation failure for the form field ``name``."""

    name: str
    error: ErrorMessage

    def describe(self) -> str:
        """Return a human-readable description of the failure."""
        field_name = self.name.replace("_", " ")
        kind, value = self.error.kind, self.error.value
        if kind is ErrorKind.NO_FILES:
            return f"No files were uploaded for field: '{field_name}'"
        if kind is ErrorKind.FILE_TOO_SMALL:
            return (
                f"File size is too small for field '{field_name}'. "
                f"Minimum size is {format_size(value)}"
            )
        if kind is ErrorKind.FILE_TOO_LARGE:
            return (
                f"File size is too big for field '{field_name}'. "
                f"Maximum size is {format_size(value)}"
            )
        if kind is ErrorKind.TOO_FEW_FILES:
            return f"Too few files uploaded for field '{field_name}'. Minimum is {value}"
        if kind is ErrorKind.TOO_MANY_FILES:
            return f"Too many files uploaded for field '{field_name}'. Maximum is {value}"
        if kind is ErrorKind.INVALID_FILE_EXTENSION:
            return f"Invalid file extension for field '{field_name}': .{value or ''}"
        if kind is ErrorKind.INVALID_CONTENT_TYPE:
            return f"Invalid mime type: {value}"
        return f"Invalid file, file extension is required: {value}"


class MultipartError(Exception):
    """Base class for all multipart upload errors."""


class NoFileError(MultipartError):
    """No file was part of the upload."""

    def __init__(self) -> None:
        super().__init__("No file was uploaded")


class NoContentTypeError(MultipartError):
    """A file part had no usable ``Content-Type`` header."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid content type: {detail}")


class MissingDataFieldError(MultipartError):
    """A required plain form field was not submitted."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Data field '{field}' is required")


class InvalidContentDispositionError(MultipartError):
    """A part's ``Content-Disposition`` header could not be used."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid content disposition: {detail}")


class MalformedMultipartError(MultipartError):
    """The multipart body itself could not be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(MultipartError):
    """Uploaded files broke a validation rule."""

    def __init__(self, input_error: InputError) -> None:
        self.input_error = input_error
        super().__init__(input_error.describe())

    @property
    def field(self) -> str:
        return self.input_error.name

    @property
    def error(self) -> ErrorMessage:
        return self.input_error.error