"""Common query parameters and small request payload shapes."""

from __future__ import annotations

import datetime
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_DEFAULT_PAGE_SIZE = 10
_MAX_PAGE_SIZE = 150


class InvalidDateError(ValueError):
    """A date given by a client could not be parsed."""


def _optional_int(mapping: Mapping[str, Any], key: str) -> int | None:
    value = mapping.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"invalid value for `{key}`: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid value for `{key}`: {value!r}") from None


def _optional_date(mapping: Mapping[str, Any], key: str) -> datetime.date | None:
    value = mapping.get(key)
    if value is None:
        return None
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value))
    except ValueError:
        raise ValueError(f"invalid value for `{key}`: {value!r}") from None


def _optional_str(mapping: Mapping[str, Any], key: str) -> str | None:
    value = mapping.get(key)
    return None if value is None else str(value)


@dataclass
class QueryParams:
    """Filtering, pagination and sorting parameters of a listing request."""

    search: str | None = None
    limit: int | None = None
    page: int | None = None
    per_page: int | None = None
    status: str | None = None
    stage: str | None = None
    order_col: str | None = None
    order_dir: str | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> QueryParams:
        """Build from query-string values; unknown keys are ignored."""
        return cls(
            search=_optional_str(mapping, "search"),
            limit=_optional_int(mapping, "limit"),
            page=_optional_int(mapping, "page"),
            per_page=_optional_int(mapping, "per_page"),
            status=_optional_str(mapping, "status"),
            stage=_optional_str(mapping, "stage"),
            order_col=_optional_str(mapping, "order_col"),
            order_dir=_optional_str(mapping, "order_dir"),
            start_date=_optional_date(mapping, "start_date"),
            end_date=_optional_date(mapping, "end_date"),
        )

    def search_query(self) -> str:
        """Return the search term, or an empty string."""
        return self.search or ""

    def search_query_like(self) -> str:
        """Return the search term wrapped for an SQL ``LIKE`` match."""
        return f"%{self.search_query()}%"

    def page_limit(self) -> int:
        """Return ``limit``, defaulting to 10 and capped at 150."""
        return min(self.limit if self.limit is not None else _DEFAULT_PAGE_SIZE, _MAX_PAGE_SIZE)

    def curr_page(self) -> int:
        """Return the requested page, defaulting to 1."""
        return self.page if self.page is not None else 1

    def page_size(self) -> int:
        """Return ``per_page``, defaulting to 10 and capped at 150."""
        return min(
            self.per_page if self.per_page is not None else _DEFAULT_PAGE_SIZE, _MAX_PAGE_SIZE
        )


def date_from_unsafe_input(date: str, field_name: str) -> datetime.datetime:
    """Parse a ``YYYY-MM-DD`` string into midnight of that day."""
    try:
        return datetime.datetime.strptime(f"{date} 00:00:00", "%Y-%m-%d %H:%M:%S")
    except ValueError as err:
        raise InvalidDateError(
            f"Invalid {field_name} input value({date}), please make sure it's valid date; {err}"
        ) from err


@dataclass
class HttpHeaderItem:
    """One HTTP header as a name and value pair."""

    name: str
    value: str


def _required(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _parse_uuid(value: Any) -> uuid.UUID:
    if not isinstance(value, str):
        raise ValueError(f"invalid UUID: {value!r}")
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ValueError(f"invalid UUID: {value!r}") from None


def _required_str(data: Mapping[str, Any], key: str) -> str:
    value = _required(data, key)
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}`: expected a string")
    return value


@dataclass
class IdsVecDto:
    """A payload carrying a list of UUIDs."""

    ids: list[uuid.UUID]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IdsVecDto:
        raw = _required(data, "ids")
        if not isinstance(raw, list):
            raise ValueError("invalid type for `ids`: expected a list")
        return cls(ids=[_parse_uuid(item) for item in raw])


@dataclass
class IdAsUuid:
    """A payload carrying a single UUID."""

    id: uuid.UUID

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IdAsUuid:
        return cls(id=_parse_uuid(_required(data, "id")))


@dataclass
class IdPathParam:
    """A path parameter holding an identifier string."""

    id: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IdPathParam:
        return cls(id=_required_str(data, "id"))


@dataclass
class ReasonPayload:
    """A payload with a free-text reason of 3 to 1500 characters."""

    reason: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReasonPayload:
        reason = _required_str(data, "reason")
        if not 3 <= len(reason) <= 1500:
            raise ValueError("reason: length must be between 3 and 1500")
        return cls(reason=reason)