"""Parsing of ``Content-Disposition`` header values used in multipart bodies."""

from __future__ import annotations

from dataclasses import dataclass, field


def parse_parameters(header: str) -> dict[str, str]:
    """Split a ``Content-Disposition`` value into its ``key=value`` parameters.

    Parts without an ``=`` (such as the ``form-data`` disposition type) are
    ignored. Keys and values are trimmed and surrounding quotes are removed
    from values. A later parameter with the same key replaces an earlier one.
    """
    parameters: dict[str, str] = {}
    for part in header.split(";"):
        key, sep, value = part.strip().partition("=")
        if sep:
            parameters[key.strip()] = value.strip().strip('"')
    return parameters


@dataclass
class ContentDisposition:
    """The parameters of a multipart part's ``Content-Disposition`` header."""

    variables: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, header: str) -> ContentDisposition:
        """Build an instance from a raw header value."""
        return cls(variables=parse_parameters(header))

    @property
    def is_file_field(self) -> bool:
        """True when the part carries a ``filename`` parameter."""
        return "filename" in self.variables

    @property
    def has_name_field(self) -> bool:
        """True when the part carries a ``name`` parameter."""
        return "name" in self.variables

    def get(self, key: str) -> str | None:
        """Return the value of parameter ``key``, or None if absent."""
        return self.variables.get(key)

    def name(self) -> str | None:
        """Return the form field name, if any."""
        return self.get("name")

    def filename(self) -> str | None:
        """Return the uploaded file's name, if any."""
        return self.get("filename")