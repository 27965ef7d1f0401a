"""Client details taken from request headers and the connection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Union

HeaderValue = Union[str, bytes]
Headers = Union[Mapping[str, HeaderValue], Iterable[tuple[str, HeaderValue]]]
PeerAddr = Union[str, tuple[str, int], None]


def _pairs(headers: Headers) -> Iterator[tuple[str, HeaderValue]]:
    if isinstance(headers, Mapping):
        yield from headers.items()
    else:
        yield from headers


def _text(value: HeaderValue) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("ascii")
        except UnicodeDecodeError:
            raise ValueError(f"header value is not valid ASCII: {value!r}") from None
    return value


def _header(headers: Headers, name: str) -> str | None:
    wanted = name.lower()
    for key, value in _pairs(headers):
        if key.lower() == wanted:
            return _text(value)
    return None


def headers_to_dict(headers: Headers) -> dict[str, str]:
    """Return headers as a dict with lower-case names; later duplicates win."""
    return {key.lower(): _text(value) for key, value in _pairs(headers)}


def user_agent(headers: Headers) -> str | None:
    """Return the ``User-Agent`` header, if present."""
    return _header(headers, "user-agent")


def _forwarded_for(value: str) -> str | None:
    for pair in value.split(";"):
        for element in pair.split(","):
            name, sep, item = element.strip().partition("=")
            if sep and name.lower() == "for":
                return item.strip()
    return None


def _format_peer(peer_addr: PeerAddr) -> str | None:
    if peer_addr is None or isinstance(peer_addr, str):
        return peer_addr
    host, port = peer_addr
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _remote_ip(headers: Headers, peer_addr: PeerAddr) -> str | None:
    forwarded = _header(headers, "forwarded")
    if forwarded is not None:
        found = _forwarded_for(forwarded)
        if found is not None:
            return found
    forwarded_for = _header(headers, "x-forwarded-for")
    if forwarded_for is not None:
        return forwarded_for.split(",")[0].strip()
    return _format_peer(peer_addr)


@dataclass
class ClientInfo:
    """The client's address and user agent."""

    ip: str | None = None
    ua: str | None = None

    @classmethod
    def from_request(cls, headers: Headers, peer_addr: PeerAddr = None) -> ClientInfo:
        """Read the client from ``Forwarded``, ``X-Forwarded-For`` or the peer address."""
        return cls(ip=_remote_ip(headers, peer_addr), ua=user_agent(headers))

    def into_parts(self) -> tuple[str | None, str | None]:
        """Return ``(ip, ua)``."""
        return self.ip, self.ua