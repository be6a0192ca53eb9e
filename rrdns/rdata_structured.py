"""Wire encoding of SOA, MX, SRV and CAA record data."""

from __future__ import annotations

import re
import struct

from .rdata_basic import RDataError, _decode_name_bytes, _text, encode_domain_name
from .utils import canonical_dns_name

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")

MAX_CAA_TAG_LENGTH = 255
MAX_CAA_VALUE_LENGTH = 255
MIN_SOA_LENGTH = 25


def _parse_uint(text: str, bits: int) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {text!r}")
    return value


def encode_soa(data: str) -> bytes:
    """Encode "mname rname serial refresh retry expire minimum"."""
    parts = data.split()
    if len(parts) != 7:
        raise RDataError(f"invalid SOA record format (expected 7 fields): {data}")
    try:
        mname = encode_domain_name(parts[0])
    except RDataError as exc:
        raise RDataError(f"invalid SOA mname: {exc}") from exc
    try:
        rname = encode_domain_name(parts[1])
    except RDataError as exc:
        raise RDataError(f"invalid SOA rname: {exc}") from exc
    numbers = []
    for index, text in enumerate(parts[2:], start=2):
        try:
            numbers.append(_parse_uint(text, 32))
        except ValueError as exc:
            raise RDataError(f"invalid SOA field {index}: {exc}") from exc
    return mname + rname + struct.pack("!5I", *numbers)


def decode_soa(data: bytes) -> str:
    """Decode SOA data into "mname rname serial refresh retry expire minimum"."""
    data = bytes(data)
    if len(data) < MIN_SOA_LENGTH:
        raise RDataError(f"invalid SOA data length: {len(data)}")
    try:
        mname = _decode_name_bytes(data)
    except RDataError as exc:
        raise RDataError(f"invalid SOA mname: {exc}") from exc
    offset = len(mname) + 2
    try:
        rname = _decode_name_bytes(data[offset:])
    except RDataError as exc:
        raise RDataError(f"invalid SOA rname: {exc}") from exc
    offset += len(rname) + 2
    tail = data[offset:]
    if len(tail) < 20:
        raise RDataError("SOA record missing integer fields")
    numbers = struct.unpack_from("!5I", tail)
    return " ".join([_text(mname), _text(rname), *map(str, numbers)])


def encode_mx(data: str) -> bytes:
    """Encode "preference exchange"."""
    parts = data.split()
    if len(parts) != 2:
        raise RDataError(f"invalid MX record format (expected: preference domain): {data}")
    pref_text, exchange = parts
    if not _INT_RE.fullmatch(pref_text) or not 0 <= int(pref_text) <= 0xFFFF:
        raise RDataError(f"invalid MX preference: {pref_text}")
    try:
        encoded = encode_domain_name(exchange)
    except RDataError as exc:
        raise RDataError(f"invalid MX exchange domain: {exchange}") from exc
    return struct.pack("!H", int(pref_text)) + encoded


def decode_mx(data: bytes) -> str:
    """Decode MX data into "preference exchange"."""
    data = bytes(data)
    if len(data) < 2:
        raise RDataError("invalid MX data length")
    (pref,) = struct.unpack_from("!H", data)
    try:
        exchange = _decode_name_bytes(data[2:])
    except RDataError as exc:
        raise RDataError(f"invalid MX exchange domain: {exc}") from exc
    return f"{pref} {_text(exchange)}"


def encode_srv(data: str) -> bytes:
    """Encode "priority weight port target"."""
    parts = data.split()
    if len(parts) != 4:
        raise RDataError(f"invalid SRV record format (expected 4 fields): {data}")
    numbers = []
    for index, text in enumerate(parts[:3]):
        try:
            numbers.append(_parse_uint(text, 16))
        except ValueError as exc:
            raise RDataError(f"invalid SRV field {index}: {exc}") from exc
    try:
        target = encode_domain_name(parts[3])
    except RDataError as exc:
        raise RDataError(f"invalid SRV target: {exc}") from exc
    return struct.pack("!3H", *numbers) + target


def decode_srv(data: bytes) -> str:
    """Decode SRV data into "priority weight port target"."""
    data = bytes(data)
    if len(data) < 6:
        raise RDataError(f"invalid SRV record length: {len(data)}")
    priority, weight, port = struct.unpack_from("!3H", data)
    try:
        target = _decode_name_bytes(data[6:])
    except RDataError as exc:
        raise RDataError(f"invalid SRV target: {exc}") from exc
    return canonical_dns_name(f"{priority} {weight} {port} {_text(target)}")


def encode_caa(data: str) -> bytes:
    """Encode 'flag tag "value"'."""
    parts = data.split()
    if len(parts) < 3:
        raise RDataError(f'invalid CAA record format (expected: flag tag "value"): {data}')
    try:
        flag = _parse_uint(parts[0], 8)
    except ValueError as exc:
        raise RDataError(f"invalid CAA flag: {exc}") from exc
    tag = parts[1].encode("utf-8")
    if len(tag) > MAX_CAA_TAG_LENGTH:
        raise RDataError("CAA tag too long")
    value = " ".join(parts[2:]).strip('"').encode("utf-8")
    if len(value) > MAX_CAA_VALUE_LENGTH:
        raise RDataError("CAA value too long")
    return bytes([flag, len(tag)]) + tag + value


def decode_caa(data: bytes) -> str:
    """Decode CAA data into 'flag tag "value"'; the value is passed through unchanged."""
    data = bytes(data)
    if len(data) < 2:
        raise RDataError(f"invalid CAA record length: {len(data)}")
    flag, tag_len = data[0], data[1]
    if len(data) < 2 + tag_len:
        raise RDataError(f"invalid CAA tag length: {tag_len}")
    tag = _text(data[2 : 2 + tag_len])
    value = _text(data[2 + tag_len :])
    return f'{flag} {tag} "{value}"'