"""Application configuration loaded from DNS_* environment variables."""

from __future__ import annotations

import ipaddress
import os
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Mapping

ENV_PREFIX = "DNS_"
DEFAULT_SERVERS = ("1.1.1.1:53", "1.0.0.1:53")
VALID_ENVS = ("dev", "prod")
VALID_LOG_LEVELS = ("debug", "info", "warn", "error")

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""


def valid_ip_port(addr: str) -> bool:
    """Return True if *addr* is an IP address and a port 1-65535, as "ip:port" or "[ipv6]:port"."""
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0 or "[" in addr[1:]:
            return False
        host, rest = addr[1:end], addr[end + 1 :]
        if not rest.startswith(":") or "]" in rest:
            return False
        port = rest[1:]
        if ":" in port:
            return False
    else:
        i = addr.rfind(":")
        if i < 0:
            return False
        host, port = addr[:i], addr[i + 1 :]
        if ":" in host or "[" in host or "]" in host:
            return False
    if not host or not port or "%" in host:
        return False
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    if not _UINT_RE.fullmatch(port):
        return False
    return 0 < int(port) < 65536


@dataclass
class AppConfig:
    """Runtime settings of the DNS server."""

    cache_size: int = 1000
    disable_cache: bool = False
    env: str = "prod"
    log_level: str = "info"
    port: int = 53
    zone_dir: str = "/etc/rr-dns/zones/"
    servers: list[str] = field(default_factory=lambda: list(DEFAULT_SERVERS))
    max_recursion: int = 8

    def validate(self) -> None:
        """Raise ConfigError listing every setting that is out of range."""
        problems = []
        if self.cache_size < 1:
            problems.append(f"cache_size must be >= 1, got {self.cache_size}")
        if self.env not in VALID_ENVS:
            problems.append(f"env must be one of {' '.join(VALID_ENVS)}, got {self.env!r}")
        if self.log_level not in VALID_LOG_LEVELS:
            problems.append(
                f"log_level must be one of {' '.join(VALID_LOG_LEVELS)}, got {self.log_level!r}"
            )
        if not 1 <= self.port < 65535:
            problems.append(f"port must be in 1..65534, got {self.port}")
        if not self.zone_dir:
            problems.append("zone_dir is required")
        if not self.servers:
            problems.append("servers is required")
        problems.extend(
            f"servers entry {server!r} is not a valid ip:port"
            for server in self.servers
            if not valid_ip_port(server)
        )
        if self.max_recursion < 1:
            problems.append(f"max_recursion must be >= 1, got {self.max_recursion}")
        if problems:
            raise ConfigError("validation failed: " + "; ".join(problems))


def _env_values(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, raw in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        value = raw.strip()
        if value and (" " in value or "," in value):
            values[name] = [part for part in re.split(r"[ ,]", value) if part]
        else:
            values[name] = value
    return values


def _scalar(name: str, value: Any) -> Any:
    if isinstance(value, list):
        raise ConfigError(f"error unmarshalling config: {name!r} expects a single value")
    return value


def _to_uint(name: str, value: Any) -> int:
    value = _scalar(name, value)
    if isinstance(value, int):
        return value
    if value == "":
        return 0
    if not _UINT_RE.fullmatch(value):
        raise ConfigError(f"error unmarshalling config: {name!r}: cannot parse {value!r} as uint")
    return int(value)


def _to_int(name: str, value: Any) -> int:
    value = _scalar(name, value)
    if isinstance(value, int):
        return value
    if value == "":
        return 0
    if not _INT_RE.fullmatch(value):
        raise ConfigError(f"error unmarshalling config: {name!r}: cannot parse {value!r} as int")
    return int(value)


def _to_bool(name: str, value: Any) -> bool:
    value = _scalar(name, value)
    if isinstance(value, bool):
        return value
    if value == "" or value in _FALSE:
        return False
    if value in _TRUE:
        return True
    raise ConfigError(f"error unmarshalling config: {name!r}: cannot parse {value!r} as bool")


def _to_str(name: str, value: Any) -> str:
    return str(_scalar(name, value))


def _to_list(name: str, value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [value] if value else []


_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "cache_size": _to_uint,
    "disable_cache": _to_bool,
    "env": _to_str,
    "log_level": _to_str,
    "port": _to_int,
    "zone_dir": _to_str,
    "servers": _to_list,
    "max_recursion": _to_int,
}


def load(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build a validated AppConfig from defaults overlaid with DNS_* variables."""
    source = os.environ if environ is None else environ
    values = asdict(AppConfig())
    values.update(_env_values(source))
    settings = {name: convert(name, values[name]) for name, convert in _CONVERTERS.items()}
    cfg = AppConfig(**settings)
    cfg.validate()
    return cfg