from __future__ import annotations

from dataclasses import dataclass

from questline.domain.models.AddressModel import Address


@dataclass(frozen=True, slots=True)
class BoardContext:
    """Process-wide values fixed when the board is initialized."""

    admin: Address

    @classmethod
    def for_admin(cls, admin: Address | str) -> "BoardContext":
        return cls(admin=Address.parse(admin))
