"""Rule-based validation of uploaded files grouped by form field."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from foxtive_web.errors import ErrorKind, ErrorMessage, InputError, ValidationError

if TYPE_CHECKING:
    from foxtive_web.file_input import FileInput


@dataclass
class FileRules:
    """Constraints applied to the files submitted for one field.

    ``min_files`` and ``max_files`` only take effect when a whole set of
    files for a field is validated, not when a single file validates itself.
    """

    required: bool = False
    extension_required: bool = False
    min_size: int | None = None
    max_size: int | None = None
    allowed_extensions: Sequence[str] | None = None
    allowed_content_types: Sequence[str] | None = None
    min_files: int | None = None
    max_files: int | None = None


def _debug_list(items: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in items) + "]"


def _fail(name: str, kind: ErrorKind, value: int | str | None = None) -> ValidationError:
    return ValidationError(InputError(name=name, error=ErrorMessage(kind, value)))


def _check_file(rules: FileRules, file: FileInput) -> None:
    name = file.field_name

    if rules.extension_required and file.extension is None:
        raise _fail(name, ErrorKind.MISSING_FILE_EXTENSION, file.file_name)

    if rules.min_size is not None and file.size < rules.min_size:
        raise _fail(name, ErrorKind.FILE_TOO_SMALL, rules.min_size)

    if rules.max_size is not None and file.size > rules.max_size:
        raise _fail(name, ErrorKind.FILE_TOO_LARGE, rules.max_size)

    if rules.allowed_extensions is not None:
        if file.extension is None:
            raise _fail(name, ErrorKind.MISSING_FILE_EXTENSION, file.file_name)
        if file.extension.lower() not in rules.allowed_extensions:
            raise _fail(name, ErrorKind.INVALID_FILE_EXTENSION, file.extension)

    if rules.allowed_content_types is not None:
        if file.content_type.lower() not in rules.allowed_content_types:
            raise _fail(
                name,
                ErrorKind.INVALID_CONTENT_TYPE,
                "Invalid content type. Allowed content types are: "
                + _debug_list(rules.allowed_content_types),
            )


def _check_field(field_name: str, files: Sequence[FileInput] | None, rules: FileRules) -> None:
    if files is None:
        if rules.required:
            raise _fail(field_name, ErrorKind.NO_FILES)
        return

    count = len(files)
    if rules.required and count == 0:
        raise _fail(field_name, ErrorKind.NO_FILES)

    if rules.min_files is not None and count < rules.min_files:
        raise _fail(field_name, ErrorKind.TOO_FEW_FILES, count)

    if rules.max_files is not None and count > rules.max_files:
        raise _fail(field_name, ErrorKind.TOO_MANY_FILES, count)

    for file in files:
        _check_file(rules, file)


@dataclass
class Validator:
    """A set of per-field file rules."""

    rules: dict[str, FileRules] = field(default_factory=dict)

    def add_rule(self, field: str, rules: FileRules) -> Validator:
        """Return a new validator that also applies ``rules`` to ``field``."""
        return Validator(rules={**self.rules, field: rules})

    def validate(self, files: Mapping[str, Sequence[FileInput]]) -> None:
        """Check ``files`` against every rule; raise ValidationError on the first failure."""
        for field_name, rules in self.rules.items():
            _check_field(field_name, files.get(field_name), rules)