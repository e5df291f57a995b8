"""
Time-ordered UUID version 7 identifiers.

Layout (most significant bit first):

    48 bits  unix timestamp, milliseconds, big-endian
     4 bits  version, 0b0111
    12 bits  random
     2 bits  variant, 0b10
    62 bits  random

Ten random bytes are drawn per identifier, six of those bits are overwritten
by the version and variant markers.
"""

import secrets
import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import UUID

__all__ = [
    "MAX_TIMESTAMP_MILLIS",
    "UuidGenerator",
    "extract_timestamp",
    "extract_timestamp_millis",
    "from_halves",
    "generate",
    "generate_at",
    "generate_from_timestamp",
    "halves",
    "is_uuid7",
]

type RandomSource = Callable[[int], bytes]
type Clock = Callable[[], int]

MAX_TIMESTAMP_MILLIS = (1 << 48) - 1

_RANDOM_LENGTH = 10
_MASK_64 = (1 << 64) - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)


class UuidGenerator:
    """Builds UUIDv7 values from a clock and a random byte source.

    Both collaborators are injectable. ``random_bytes(n)`` must return ``n``
    cryptographically strong bytes and be safe for concurrent callers;
    ``clock()`` returns nanoseconds since the epoch.
    """

    def __init__(
        self,
        random_bytes: RandomSource = secrets.token_bytes,
        clock: Clock = time.time_ns,
    ):
        self._random_bytes = random_bytes
        self._clock = clock

    def generate(self) -> UUID:
        return self.generate_from_timestamp(self._clock() // 1_000_000)

    def generate_at(self, moment: datetime) -> UUID:
        # Naive datetimes are read as UTC
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        return self.generate_from_timestamp((moment - _EPOCH) // _ONE_MILLISECOND)

    def generate_from_timestamp(self, timestamp_millis: int) -> UUID:
        if not 0 <= timestamp_millis <= MAX_TIMESTAMP_MILLIS:
            raise ValueError(
                f"timestamp_millis must be within 0..{MAX_TIMESTAMP_MILLIS}, "
                f"got {timestamp_millis}"
            )

        rand = self._random_bytes(_RANDOM_LENGTH)
        if len(rand) != _RANDOM_LENGTH:
            raise ValueError(
                f"random source returned {len(rand)} bytes, "
                f"expected {_RANDOM_LENGTH}"
            )

        buffer = bytearray(timestamp_millis.to_bytes(6, "big") + rand)
        buffer[6] = (buffer[6] & 0x0F) | 0x70  # version 7
        buffer[8] = (buffer[8] & 0x3F) | 0x80  # variant 10

        return UUID(bytes=bytes(buffer))


def extract_timestamp_millis(identifier: UUID) -> int:
    """Return the millisecond timestamp held in bits 0-47."""
    high, _ = halves(identifier)
    return high >> 16


def extract_timestamp(identifier: UUID) -> datetime:
    return _EPOCH + timedelta(milliseconds=extract_timestamp_millis(identifier))


def halves(identifier: UUID) -> tuple[int, int]:
    """Split an identifier into its (high, low) unsigned 64-bit halves."""
    value = identifier.int
    return value >> 64, value & _MASK_64


def from_halves(high: int, low: int) -> UUID:
    if not (0 <= high <= _MASK_64 and 0 <= low <= _MASK_64):
        raise ValueError("both halves must be unsigned 64-bit integers")
    return UUID(int=(high << 64) | low)


def is_uuid7(identifier: UUID) -> bool:
    return identifier.version == 7 and (identifier.int >> 62) & 0b11 == 0b10


_default = UuidGenerator()

generate = _default.generate
generate_at = _default.generate_at
generate_from_timestamp = _default.generate_from_timestamp
