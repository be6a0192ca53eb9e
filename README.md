# rrdns

Core pieces of a small DNS server, usable as a library. Only the Python
standard library is needed.

## What it provides

- `rrdns.utils.canonical_dns_name(name)` puts a DNS name into canonical form.
  It strips surrounding whitespace, lowercases the name and removes every
  trailing dot.
- `rrdns.rdata.encode(rr_type, data)` and `rrdns.rdata.decode(rr_type, data)`
  convert record data between its text form and its RDATA wire form. They
  support A, NS, CNAME, SOA, PTR, MX, TXT, AAAA, SRV and CAA records, and the
  record type is chosen with the `rrdns.rdata.RRType` enum.
  - Record types that are known but not supported raise `RDataError`. These
    are NAPTR, OPT, DS, RRSIG, NSEC, DNSKEY, TLSA, SVCB and HTTPS.
  - Any other record type passes through unchanged. The text is encoded as
    UTF-8 and the bytes are decoded as UTF-8.
  - The per-type codecs can also be called on their own:
    - `rrdns.rdata_basic` has `encode_a`/`decode_a`, `encode_aaaa`/`decode_aaaa`,
      `encode_ns`, `encode_cname`, `encode_ptr`, `encode_txt` and their
      decoders, `encode_domain_name`/`decode_domain_name`, `is_ipv4` and `is_ipv6`.
    - `rrdns.rdata_structured` has `encode_soa`/`decode_soa`,
      `encode_mx`/`decode_mx`, `encode_srv`/`decode_srv` and
      `encode_caa`/`decode_caa`.
  - `RDataError` is a subclass of `ValueError`. It is raised for malformed
    input, such as a label longer than 63 bytes, a TXT segment longer than
    255 bytes or a truncated wire value.
- Text forms:
  - TXT data is written as segments separated by semicolons, and decoding
    joins the segments with `"; "`.
  - SOA data is `mname rname serial refresh retry expire minimum`.
  - MX data is `preference exchange`.
  - SRV data is `priority weight port target`.
  - CAA data is `flag tag "value"`.
  - Decoded names carry no trailing dot.
- `rrdns.config.load(environ=None)` builds an `AppConfig` from defaults
  overridden by `DNS_`-prefixed variables. It reads from `os.environ` unless
  a mapping is given. It validates the result and raises `ConfigError` when a
  value cannot be parsed or is out of range. `AppConfig.validate()` can also
  be called directly, and `valid_ip_port(addr)` checks a single `ip:port`
  or `[ipv6]:port` string.
- `rrdns.clock` provides the `Clock` interface, `RealClock` (current UTC
  time) and `MockClock`, a fixed clock moved with `advance(timedelta)`.
- `rrdns.log` provides a process-wide structured logger.
  - The module-level functions `info`, `warn`, `error`, `debug`, `panic` and
    `fatal` take a mapping of fields (or `None`) and a message.
  - `configure(env, level)` installs a `StdLogger`. With `env == "prod"` it
    writes JSON lines to stderr. Any other value of `env` gives coloured
    console lines.
  - An unknown level raises `ValueError`.
  - `set_logger`/`get_logger` replace or return the current logger, and
    `new_noop_logger()` returns a `NoopLogger` that discards everything.
  - `StdLogger.panic` logs the message and then raises `LogPanic`.
    `StdLogger.fatal` logs the message and then raises `SystemExit(1)`.

## Examples

```python
from rrdns.rdata import RRType, encode, decode

wire = encode(RRType.MX, "10 mail.example.com")
assert decode(RRType.MX, wire) == "10 mail.example.com"

from rrdns.utils import canonical_dns_name
assert canonical_dns_name("  WwW.ExAmPlE.CoM.  ") == "www.example.com"
```

Loading the configuration from a mapping:

```python
from rrdns.config import load

cfg = load({"DNS_PORT": "5353", "DNS_SERVERS": "8.8.8.8:53,8.8.4.4:53"})
print(cfg.port, cfg.servers)  # 5353 ['8.8.8.8:53', '8.8.4.4:53']
```

### Configuration variables

| Variable            | Default                    | Rule                        |
|---------------------|----------------------------|-----------------------------|
| `DNS_CACHE_SIZE`    | `1000`                     | at least 1                  |
| `DNS_DISABLE_CACHE` | `false`                    | boolean                     |
| `DNS_ENV`           | `prod`                     | `dev` or `prod`             |
| `DNS_LOG_LEVEL`     | `info`                     | `debug`, `info`, `warn`, `error` |
| `DNS_PORT`          | `53`                       | 1 to 65534                  |
| `DNS_ZONE_DIR`      | `/etc/rr-dns/zones/`       | not empty                   |
| `DNS_SERVERS`       | `1.1.1.1:53 1.0.0.1:53`    | list of `ip:port`           |
| `DNS_MAX_RECURSION` | `8`                        | at least 1                  |

Separate list values with commas or spaces.

## What this package does not do

The package has no DNS server. It does not listen on a port or handle
queries. It does not load zone files, forward queries to upstream servers or
cache responses. `AppConfig` carries settings for those tasks, such as
`zone_dir`, `servers`, `cache_size` and `max_recursion`, but nothing in the
package uses them beyond validating them. It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```