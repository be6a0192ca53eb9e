import struct

import pytest

from rrdns.rdata_basic import RDataError
from rrdns.rdata_structured import (
    decode_caa,
    decode_mx,
    decode_soa,
    decode_srv,
    encode_caa,
    encode_mx,
    encode_soa,
    encode_srv,
)

NS_EXAMPLE_COM = b"\x02ns\x07example\x03com\x00"
HOSTMASTER_EXAMPLE_COM = b"\x0ahostmaster\x07example\x03com\x00"
EXAMPLE_COM = b"\x07example\x03com\x00"


def test_encode_soa_valid():
    data = "ns.example.com hostmaster.example.com 20240601 3600 600 86400 300"
    expected = (
        NS_EXAMPLE_COM
        + HOSTMASTER_EXAMPLE_COM
        + struct.pack("!5I", 20240601, 3600, 600, 86400, 300)
    )
    assert encode_soa(data) == expected


def test_encode_soa_invalid_field_count():
    with pytest.raises(RDataError, match="expected 7 fields"):
        encode_soa("ns.example.com hostmaster.example.com 20240601 3600 600 86400")


def test_encode_soa_invalid_serial():
    with pytest.raises(RDataError, match="invalid SOA field 2"):
        encode_soa("ns.example.com hostmaster.example.com notanumber 3600 600 86400 300")


def test_encode_soa_fields_encoded_at_end():
    got = encode_soa("ns.example.com hostmaster.example.com 1 2 3 4 5")
    assert struct.unpack("!5I", got[-20:]) == (1, 2, 3, 4, 5)


def test_encode_soa_value_out_of_range():
    with pytest.raises(RDataError, match="invalid SOA field 6"):
        encode_soa("ns.example.com hostmaster.example.com 1 2 3 4 4294967296")


def test_encode_soa_mname_too_long():
    data = f"{'a' * 256} hostmaster.example.com 20240601 3600 600 86400 300"
    with pytest.raises(RDataError, match="invalid SOA mname"):
        encode_soa(data)


def test_encode_soa_rname_too_long():
    data = f"ns.example.com {'a' * 256} 20240601 3600 600 86400 300"
    with pytest.raises(RDataError, match="invalid SOA rname"):
        encode_soa(data)


def test_decode_soa_valid():
    wire = (
        NS_EXAMPLE_COM
        + HOSTMASTER_EXAMPLE_COM
        + struct.pack("!5I", 20240601, 3600, 600, 86400, 300)
    )
    assert decode_soa(wire) == "ns.example.com hostmaster.example.com 20240601 3600 600 86400 300"


def test_soa_round_trip():
    text = "ns1.example.com admin.example.com 7 7200 3600 1209600 3600"
    assert decode_soa(encode_soa(text)) == text


def test_decode_soa_invalid_length():
    with pytest.raises(RDataError, match="invalid SOA data length"):
        decode_soa(bytes(10))


def test_decode_soa_invalid_mname():
    wire = b"\xffns\x00" + b"\x01a\x00" + bytes(20)
    with pytest.raises(RDataError, match="invalid SOA mname"):
        decode_soa(wire)


def test_decode_soa_invalid_rname():
    wire = NS_EXAMPLE_COM + b"\xffhost" + bytes(20)
    with pytest.raises(RDataError, match="invalid SOA rname"):
        decode_soa(wire)


def test_decode_soa_missing_integer_fields():
    wire = b"\x01a\x00\x01b\x00" + bytes(19)
    with pytest.raises(RDataError, match="SOA record missing integer fields"):
        decode_soa(wire)


MX_CASES = [
    ("10 mail.example.com", b"\x00\x0a\x04mail" + EXAMPLE_COM),
    ("0 mx.example.org", b"\x00\x00\x02mx\x07example\x03org\x00"),
    ("65535 mail.test.net", b"\xff\xff\x04mail\x04test\x03net\x00"),
]


@pytest.mark.parametrize("text, wire", MX_CASES)
def test_encode_mx_valid(text, wire):
    assert encode_mx(text) == wire


@pytest.mark.parametrize(
    "text",
    ["", "10", "mail.example.com", "10 mail.example.com extra", "10mail.example.com"],
)
def test_encode_mx_invalid_format(text):
    with pytest.raises(RDataError, match="invalid MX record format"):
        encode_mx(text)


@pytest.mark.parametrize(
    "text", ["-1 mail.example.com", "65536 mail.example.com", "notanumber mail.example.com"]
)
def test_encode_mx_invalid_preference(text):
    with pytest.raises(RDataError, match="invalid MX preference"):
        encode_mx(text)


def test_encode_mx_domain_too_long():
    with pytest.raises(RDataError, match="invalid MX exchange domain"):
        encode_mx("10 " + "a" * 256 + ".example.com")


@pytest.mark.parametrize("text, wire", MX_CASES)
def test_decode_mx_valid(text, wire):
    assert decode_mx(wire) == text


@pytest.mark.parametrize("wire", [b"", b"\x00"])
def test_decode_mx_invalid_length(wire):
    with pytest.raises(RDataError, match="invalid MX data length"):
        decode_mx(wire)


def test_decode_mx_target_too_long():
    with pytest.raises(RDataError, match="invalid MX exchange domain"):
        decode_mx(b"\x00\x0a" + b"a" * 256)


SRV_EXAMPLE = b"\x00\x0a\x00\x14\x00\x50" + EXAMPLE_COM
SRV_SIP = b"\x00\x00\x00\x00\x01\xbb\x04_sip\x04_tcp" + EXAMPLE_COM


@pytest.mark.parametrize(
    "text, wire",
    [("10 20 80 example.com.", SRV_EXAMPLE), ("0 0 443 _sip._tcp.example.com.", SRV_SIP)],
)
def test_encode_srv_valid(text, wire):
    assert encode_srv(text) == wire


@pytest.mark.parametrize("text", ["10 20 80", "10 20 80 extra field test", ""])
def test_encode_srv_invalid_format(text):
    with pytest.raises(RDataError, match="expected 4 fields"):
        encode_srv(text)


@pytest.mark.parametrize(
    "text",
    [
        "abc 20 80 example.com.",
        "10 xyz 80 example.com.",
        "10 20 port example.com.",
        "-1 20 80 example.com.",
        "10 65536 80 example.com.",
    ],
)
def test_encode_srv_invalid_numbers(text):
    with pytest.raises(RDataError, match="invalid SRV field"):
        encode_srv(text)


def test_encode_srv_invalid_target():
    with pytest.raises(RDataError, match="invalid SRV target"):
        encode_srv("10 20 80 " + "a" * 256)


@pytest.mark.parametrize(
    "wire, text",
    [(SRV_EXAMPLE, "10 20 80 example.com"), (SRV_SIP, "0 0 443 _sip._tcp.example.com")],
)
def test_decode_srv_valid(wire, text):
    assert decode_srv(wire) == text


@pytest.mark.parametrize("wire", [b"", bytes([0, 1, 2, 3, 4])])
def test_decode_srv_invalid_length(wire):
    with pytest.raises(RDataError, match="invalid SRV record length"):
        decode_srv(wire)


def test_decode_srv_target_too_long():
    with pytest.raises(RDataError, match="invalid SRV target"):
        decode_srv(("10 20 80 " + "a" * 256).encode())


CAA_CASES = [
    ('0 issue "letsencrypt.org"', b"\x00\x05issueletsencrypt.org"),
    ('128 iodef "mailto:security@example.com"', b"\x80\x05iodefmailto:security@example.com"),
    ('0 issuewild "comodoca.com"', b"\x00\x09issuewildcomodoca.com"),
]


@pytest.mark.parametrize("text, wire", CAA_CASES)
def test_encode_caa_valid(text, wire):
    assert encode_caa(text) == wire


@pytest.mark.parametrize("text", ["0 issue", 'issue "letsencrypt.org"', "0", ""])
def test_encode_caa_invalid_format(text):
    with pytest.raises(RDataError, match="invalid CAA record format"):
        encode_caa(text)


def test_encode_caa_invalid_flag():
    with pytest.raises(RDataError, match="invalid CAA flag"):
        encode_caa('foo issue "letsencrypt.org"')


def test_encode_caa_tag_too_long():
    with pytest.raises(RDataError, match="CAA tag too long"):
        encode_caa(f'0 {"a" * 256} "value"')


def test_encode_caa_value_too_long():
    with pytest.raises(RDataError, match="CAA value too long"):
        encode_caa(f'0 issue "{"b" * 256}"')


@pytest.mark.parametrize("text, wire", CAA_CASES)
def test_decode_caa_valid(text, wire):
    assert decode_caa(wire) == text


@pytest.mark.parametrize("wire", [b"", b"\x01", b"\x01\x0a", b"\x01\x02a"])
def test_decode_caa_invalid_length(wire):
    with pytest.raises(RDataError):
        decode_caa(wire)


def test_decode_caa_tag_length_mismatch():
    with pytest.raises(RDataError, match="invalid CAA tag length"):
        decode_caa(b"\x00\x05iss")