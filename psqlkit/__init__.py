"""SQL escaping, identifier quoting, WHERE rendering, dialects and schema helpers."""

__version__ = "0.1.0"

__all__ = [
    "dialect",
    "engine",
    "enums",
    "errors",
    "escape",
    "expressions",
    "fields",
    "hexvalue",
    "keys",
    "names",
]