from __future__ import annotations

import re
from dataclasses import dataclass

HEX_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-f]{40}$")
HANDLE_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._:@-]{0,127}$")


@dataclass(frozen=True, slots=True)
class Address:
    """Caller identity.

    Either a 20-byte hex account (``0x`` + 40 hex digits) or a plain handle.
    Values are normalized to lower case so lookups are case-insensitive.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self._normalize(self.value)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def _normalize(cls, raw: str) -> str:
        if raw is None:
            raise ValueError("Address value is required")

        cleaned = str(raw).strip().lower()
        if not cleaned:
            raise ValueError("Address value cannot be empty")

        if cleaned.startswith("0x"):
            if not HEX_ADDRESS_PATTERN.fullmatch(cleaned):
                raise ValueError(
                    f"Invalid hex address {raw!r}. Expected 0x followed by 40 hex digits."
                )
            return cleaned

        if not HANDLE_PATTERN.fullmatch(cleaned):
            raise ValueError(f"Invalid address handle {raw!r}")
        return cleaned

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: "Address | str") -> "Address":
        if isinstance(raw, Address):
            return raw
        return cls(raw)
