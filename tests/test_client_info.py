import pytest

from foxtive_web.client_info import ClientInfo, headers_to_dict, user_agent


def test_user_agent_case_insensitive():
    assert user_agent({"user-agent": "curl/8.0"}) == "curl/8.0"
    assert user_agent([("USER-AGENT", b"curl/8.0")]) == "curl/8.0"


def test_user_agent_missing():
    assert user_agent({"accept": "text/html"}) is None


def test_headers_to_dict_lowercases_names():
    result = headers_to_dict({"Content-Type": "text/plain", "X-Id": b"abc"})
    assert result == {"content-type": "text/plain", "x-id": "abc"}


def test_headers_to_dict_later_duplicate_wins():
    result = headers_to_dict([("Accept", "a"), ("accept", "b")])
    assert result == {"accept": "b"}


def test_headers_to_dict_rejects_non_ascii_bytes():
    with pytest.raises(ValueError):
        headers_to_dict([("X-Bad", b"\xff")])


def test_ip_from_peer_string():
    info = ClientInfo.from_request({}, "10.0.0.7:5000")
    assert info.ip == "10.0.0.7:5000"
    assert info.ua is None


def test_ip_from_peer_tuple():
    info = ClientInfo.from_request({}, ("10.0.0.7", 5000))
    assert info.ip == "10.0.0.7:5000"


def test_ip_from_ipv6_peer_tuple():
    info = ClientInfo.from_request({}, ("::1", 8080))
    assert info.ip == "[::1]:8080"


def test_ip_from_x_forwarded_for_takes_first():
    headers = {"X-Forwarded-For": "203.0.113.5, 198.51.100.9"}
    info = ClientInfo.from_request(headers, "10.0.0.7:5000")
    assert info.ip == "203.0.113.5"


def test_forwarded_header_preferred():
    headers = {
        "Forwarded": "proto=https;for=192.0.2.60;by=203.0.113.43",
        "X-Forwarded-For": "203.0.113.5",
    }
    info = ClientInfo.from_request(headers, "10.0.0.7:5000")
    assert info.ip == "192.0.2.60"


def test_forwarded_without_for_falls_back():
    headers = {"Forwarded": "proto=https", "X-Forwarded-For": "203.0.113.5"}
    assert ClientInfo.from_request(headers).ip == "203.0.113.5"


def test_no_address_at_all():
    assert ClientInfo.from_request({}).ip is None


def test_into_parts():
    info = ClientInfo.from_request({"User-Agent": "agent/1"}, "10.0.0.7:5000")
    assert info.into_parts() == ("10.0.0.7:5000", "agent/1")