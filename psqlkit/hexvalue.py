"""Binary values stored as hexadecimal text."""

from __future__ import annotations

import binascii
from typing import Any


class Hex(bytearray):
    """Binary data that is stored in the database as a hex string."""

    def scan(self, src: Any) -> None:
        """Load the value from a hex string read from the database."""
        if not isinstance(src, (str, bytes, bytearray, memoryview)):
            raise TypeError(f"unsupported input format {type(src).__name__}")
        try:
            decoded = binascii.unhexlify(src)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid hex value: {exc}") from exc
        self[:] = decoded

    def value(self) -> str:
        """Return the hex encoding stored in the database."""
        return self.hex()