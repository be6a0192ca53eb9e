"""Wire encoding of domain names and of address, name and text record data."""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

from .utils import canonical_dns_name

IPLike = Union[ipaddress.IPv4Address, ipaddress.IPv6Address, bytes, bytearray, None]

MAX_LABEL_LENGTH = 63
MAX_TXT_SEGMENT_LENGTH = 255
IPV6_LENGTH = 16

_V4_IN_V6_PREFIX = bytes(10) + b"\xff\xff"


class RDataError(ValueError):
    """Raised when record data cannot be encoded or decoded."""


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def encode_domain_name(name: str) -> bytes:
    """Encode *name* as length-prefixed labels ending in a zero byte."""
    out = bytearray()
    for label in canonical_dns_name(name).split("."):
        if not label:
            continue
        raw = label.encode("utf-8")
        if len(raw) > MAX_LABEL_LENGTH:
            raise RDataError(f"label too long: {label}")
        out.append(len(raw))
        out += raw
    out.append(0)
    return bytes(out)


def _decode_name_bytes(data: bytes) -> bytes:
    """Return the dotted name encoded at the start of *data*, as raw bytes."""
    labels = []
    pos = 0
    while pos < len(data):
        length = data[pos]
        if length == 0:
            break
        pos += 1
        if pos + length > len(data):
            raise RDataError("invalid domain name encoding")
        labels.append(bytes(data[pos : pos + length]))
        pos += length
    return b".".join(labels)


def decode_domain_name(data: bytes) -> str:
    """Decode length-prefixed labels into a dotted name without a trailing dot."""
    return _text(_decode_name_bytes(data))


def _packed(ip: IPLike) -> bytes:
    if ip is None:
        return b""
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip.packed
    return bytes(ip)


def _to4(raw: bytes) -> Optional[bytes]:
    if len(raw) == 4:
        return raw
    if len(raw) == IPV6_LENGTH and raw.startswith(_V4_IN_V6_PREFIX):
        return raw[12:]
    return None


def _to16(raw: bytes) -> Optional[bytes]:
    if len(raw) == 4:
        return _V4_IN_V6_PREFIX + raw
    if len(raw) == IPV6_LENGTH:
        return raw
    return None


def _parse_ip(text: str) -> bytes:
    if "%" in text:
        return b""
    try:
        return ipaddress.ip_address(text).packed
    except ValueError:
        return b""


def is_ipv4(ip: IPLike) -> bool:
    """Return True if *ip* is an IPv4 address, including IPv4-mapped IPv6."""
    return _to4(_packed(ip)) is not None


def is_ipv6(ip: IPLike) -> bool:
    """Return True if *ip* is an IPv6 address that is not IPv4-mapped."""
    raw = _packed(ip)
    return _to16(raw) is not None and _to4(raw) is None


def encode_a(data: str) -> bytes:
    """Encode a dotted IPv4 address into its four bytes."""
    raw = _to4(_parse_ip(data))
    if raw is None:
        raise RDataError(f"invalid A record IP: {data}")
    return raw


def decode_a(data: bytes) -> str:
    """Decode four bytes (or an IPv4-mapped 16-byte form) into a dotted IPv4 address."""
    raw = _to4(bytes(data))
    if raw is None:
        raise RDataError(f"invalid A record IP: {list(data)}")
    return str(ipaddress.IPv4Address(raw))


def encode_ns(data: str) -> bytes:
    """Encode an NS target name."""
    return encode_domain_name(data)


def decode_ns(data: bytes) -> str:
    """Decode an NS target name."""
    return decode_domain_name(data)


def encode_cname(data: str) -> bytes:
    """Encode a CNAME target name."""
    return encode_domain_name(data)


def decode_cname(data: bytes) -> str:
    """Decode a CNAME target name."""
    return decode_domain_name(data)


def encode_ptr(data: str) -> bytes:
    """Encode a PTR target name."""
    return encode_domain_name(data)


def decode_ptr(data: bytes) -> str:
    """Decode a PTR target name."""
    return decode_domain_name(data)


def encode_txt(data: str) -> bytes:
    """Encode semicolon-separated text into length-prefixed character strings."""
    out = bytearray()
    for segment in data.split(";"):
        raw = segment.strip().encode("utf-8")
        if not raw:
            continue
        if len(raw) > MAX_TXT_SEGMENT_LENGTH:
            raise RDataError(f"TXT segment too long: {len(raw)} bytes")
        out.append(len(raw))
        out += raw
    if not out:
        raise RDataError("TXT record must contain at least one segment")
    return bytes(out)


def decode_txt(data: bytes) -> str:
    """Decode length-prefixed character strings, joined with "; "."""
    segments = []
    pos = 0
    while pos < len(data):
        length = data[pos]
        pos += 1
        if length == 0:
            break
        if pos + length > len(data):
            raise RDataError("invalid TXT record: segment length exceeds remaining data")
        segments.append(_text(bytes(data[pos : pos + length])))
        pos += length
    return "; ".join(segments)


def encode_aaaa(data: str) -> bytes:
    """Encode a textual IPv6 address into its sixteen bytes."""
    raw = _parse_ip(data)
    if not is_ipv6(raw):
        raise RDataError(f"invalid AAAA record IP: {data}")
    return raw


def decode_aaaa(data: bytes) -> str:
    """Decode sixteen bytes into a textual IPv6 address."""
    raw = bytes(data)
    if len(raw) != IPV6_LENGTH:
        raise RDataError(f"invalid AAAA record length: {len(raw)}")
    if not is_ipv6(raw):
        raise RDataError(f"invalid AAAA record IP: {list(raw)}")
    return ipaddress.IPv6Address(raw).compressed