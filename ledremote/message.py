"""The effect-control message broadcast by the remote to the light nodes."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

_FORMAT = struct.Struct("<4f")


@dataclass
class EffectMessage:
    """Four press counters, one per effect, sent as little-endian floats."""

    count_one: float = 0.0
    count_two: float = 0.0
    count_three: float = 0.0
    count_four: float = 0.0

    SIZE: ClassVar[int] = _FORMAT.size

    def pack(self) -> bytes:
        """Encode the message into its wire form."""
        return _FORMAT.pack(
            self.count_one, self.count_two, self.count_three, self.count_four
        )

    @classmethod
    def unpack(cls, data: bytes) -> EffectMessage:
        """Decode a message; bytes after the first ``SIZE`` are ignored."""
        if len(data) < cls.SIZE:
            raise ValueError(
                f"effect message needs {cls.SIZE} bytes, got {len(data)}"
            )
        return cls(*_FORMAT.unpack_from(data))


def effect_enabled(value: float) -> bool:
    """Whether a counter value means its effect is switched on (odd count)."""
    count = int(value)
    return count > 0 and count % 2 == 1


def describe_send_status(success: bool) -> str:
    """Human-readable result of a send attempt."""
    if success:
        outcome, face = "Success", ":)"
    else:
        outcome, face = "Fail", ":("
    return f"Delivery {outcome} {face}"