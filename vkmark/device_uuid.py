"""Identifier of a Vulkan physical device."""

from __future__ import annotations

from dataclasses import dataclass

UUID_SIZE = 16
_HEX_DIGITS = frozenset("0123456789abcdef")


@dataclass(frozen=True)
class DeviceUUID:
    """A device UUID made of UUID_SIZE raw bytes."""

    raw: bytes = bytes(UUID_SIZE)

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != UUID_SIZE:
            raise ValueError(f"device UUID must be {UUID_SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_representation(cls, representation: str) -> DeviceUUID:
        """Parse a UUID from its lowercase hexadecimal representation."""
        if len(representation) != 2 * UUID_SIZE:
            raise ValueError("given UUID representation has wrong size!")
        for ch in representation:
            if ch not in _HEX_DIGITS:
                raise ValueError(
                    f"{ch!r} character found while parsing hexadecimal string!"
                )
        return cls(bytes.fromhex(representation))

    def representation(self) -> str:
        """Return the lowercase hexadecimal form of the UUID."""
        return self.raw.hex()

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.representation()