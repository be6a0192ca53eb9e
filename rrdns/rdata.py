"""Encoding and decoding of record data selected by record type."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .rdata_basic import (
    RDataError,
    decode_a,
    decode_aaaa,
    decode_cname,
    decode_ns,
    decode_ptr,
    decode_txt,
    encode_a,
    encode_aaaa,
    encode_cname,
    encode_ns,
    encode_ptr,
    encode_txt,
)
from .rdata_structured import (
    decode_caa,
    decode_mx,
    decode_soa,
    decode_srv,
    encode_caa,
    encode_mx,
    encode_soa,
    encode_srv,
)


class RRType(IntEnum):
    """DNS resource record types."""

    A = 1
    NS = 2
    CNAME = 5
    SOA = 6
    PTR = 12
    MX = 15
    TXT = 16
    AAAA = 28
    SRV = 33
    NAPTR = 35
    OPT = 41
    DS = 43
    RRSIG = 46
    NSEC = 47
    DNSKEY = 48
    TLSA = 52
    SVCB = 64
    HTTPS = 65
    CAA = 257


_ENCODERS: dict[int, Callable[[str], bytes]] = {
    RRType.A: encode_a,
    RRType.NS: encode_ns,
    RRType.CNAME: encode_cname,
    RRType.SOA: encode_soa,
    RRType.PTR: encode_ptr,
    RRType.MX: encode_mx,
    RRType.TXT: encode_txt,
    RRType.AAAA: encode_aaaa,
    RRType.SRV: encode_srv,
    RRType.CAA: encode_caa,
}

_DECODERS: dict[int, Callable[[bytes], str]] = {
    RRType.A: decode_a,
    RRType.NS: decode_ns,
    RRType.CNAME: decode_cname,
    RRType.SOA: decode_soa,
    RRType.PTR: decode_ptr,
    RRType.MX: decode_mx,
    RRType.TXT: decode_txt,
    RRType.AAAA: decode_aaaa,
    RRType.SRV: decode_srv,
    RRType.CAA: decode_caa,
}

_UNSUPPORTED = frozenset(
    {
        RRType.NAPTR,
        RRType.OPT,
        RRType.DS,
        RRType.RRSIG,
        RRType.NSEC,
        RRType.DNSKEY,
        RRType.TLSA,
        RRType.SVCB,
        RRType.HTTPS,
    }
)


def _type_name(rr_type: int) -> str:
    try:
        return RRType(rr_type).name
    except ValueError:
        return str(rr_type)


def encode(rr_type: int, data: str) -> bytes:
    """Encode textual record data of *rr_type*; unknown types pass through as UTF-8."""
    if rr_type in _UNSUPPORTED:
        raise RDataError(f"{_type_name(rr_type)} record encoding not supported")
    encoder = _ENCODERS.get(rr_type)
    return data.encode("utf-8") if encoder is None else encoder(data)


def decode(rr_type: int, data: bytes) -> str:
    """Decode wire record data of *rr_type*; unknown types pass through as text."""
    if rr_type in _UNSUPPORTED:
        raise RDataError(f"{_type_name(rr_type)} record decoding not supported")
    decoder = _DECODERS.get(rr_type)
    if decoder is None:
        return bytes(data).decode("utf-8", errors="replace")
    return decoder(data)