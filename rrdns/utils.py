"""Helpers for normalising DNS names."""


def canonical_dns_name(name: str) -> str:
    """Return *name* lowercased, stripped of surrounding whitespace and trailing dots."""
    return name.strip().lower().rstrip(".")