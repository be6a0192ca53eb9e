"""DNS building blocks: name canonicalisation, record data codecs, configuration, clocks and logging."""

__version__ = "0.1.0"
__all__ = ["utils", "clock", "log", "config", "rdata_basic", "rdata_structured", "rdata"]