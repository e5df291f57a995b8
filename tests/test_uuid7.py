from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta, timezone
from uuid import UUID

import pytest

from app.core import uuid7
from app.core.uuid7 import MAX_TIMESTAMP_MILLIS, UuidGenerator


def fixed_bytes(value: int):
    return lambda n: bytes([value]) * n


def test_version_and_variant_are_always_set():
    for _ in range(1000):
        identifier = uuid7.generate()
        high, low = uuid7.halves(identifier)

        assert (high >> 12) & 0xF == 7
        assert low >> 62 == 0b10
        assert identifier.version == 7
        assert uuid7.is_uuid7(identifier)


@pytest.mark.parametrize("random_byte", [0x00, 0xFF, 0x5A])
def test_markers_survive_any_random_draw(random_byte):
    generator = UuidGenerator(random_bytes=fixed_bytes(random_byte))
    identifier = generator.generate_from_timestamp(1_700_000_000_000)

    assert identifier.version == 7
    assert uuid7.halves(identifier)[1] >> 62 == 0b10


@pytest.mark.parametrize(
    "timestamp",
    [0, 1, 1_700_000_000_000, 2**32, 2**47, MAX_TIMESTAMP_MILLIS],
)
def test_timestamp_round_trip(timestamp):
    for random_byte in (0x00, 0xFF):
        generator = UuidGenerator(random_bytes=fixed_bytes(random_byte))
        identifier = generator.generate_from_timestamp(timestamp)
        assert uuid7.extract_timestamp_millis(identifier) == timestamp


def test_later_timestamp_sorts_after_earlier_for_any_random_draw():
    # Worst case: the earlier id carries maximal random bits, the later one none
    earlier = UuidGenerator(random_bytes=fixed_bytes(0xFF)).generate_from_timestamp(
        1_700_000_000_000
    )
    later = UuidGenerator(random_bytes=fixed_bytes(0x00)).generate_from_timestamp(
        1_700_000_000_001
    )

    assert earlier.int < later.int
    assert earlier < later
    assert str(earlier) < str(later)


def test_ids_follow_clock_order():
    ticks = iter([1_000_000_000_000_000_000, 1_000_000_000_001_000_000])
    generator = UuidGenerator(clock=lambda: next(ticks))

    first = generator.generate()
    second = generator.generate()

    assert uuid7.extract_timestamp_millis(first) == 1_000_000_000_000
    assert uuid7.extract_timestamp_millis(second) == 1_000_000_000_001
    assert first < second


def test_generate_truncates_clock_to_milliseconds():
    generator = UuidGenerator(clock=lambda: 1_700_000_000_123_999_999)
    assert uuid7.extract_timestamp_millis(generator.generate()) == 1_700_000_000_123


def test_unique_within_one_millisecond():
    ids = {uuid7.generate_from_timestamp(1_700_000_000_000) for _ in range(10_000)}
    assert len(ids) == 10_000


def test_unique_under_concurrent_generation():
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: uuid7.generate(), range(10_000)))

    assert len(set(ids)) == len(ids)
    assert all(uuid7.is_uuid7(i) for i in ids)


def test_canonical_text_round_trip():
    identifier = uuid7.generate()
    text = str(identifier)

    assert text == text.lower()
    assert [len(group) for group in text.split("-")] == [8, 4, 4, 4, 12]

    parsed = UUID(text)
    assert uuid7.halves(parsed) == uuid7.halves(identifier)
    assert uuid7.from_halves(*uuid7.halves(parsed)) == identifier


def test_known_timestamp_layout():
    identifier = uuid7.generate_from_timestamp(1_700_000_000_000)
    hex_digits = identifier.hex

    assert int(hex_digits[:12], 16) == 1_700_000_000_000
    assert uuid7.extract_timestamp_millis(identifier) == 1_700_000_000_000
    assert hex_digits[12] == "7"
    assert hex_digits[16] in "89ab"


def test_exact_bytes_for_deterministic_source():
    generator = UuidGenerator(random_bytes=lambda n: bytes(range(1, n + 1)))
    identifier = generator.generate_from_timestamp(0x0123456789AB)

    # 01 02 -> 71 02 (version), 03 -> 83 (variant)
    assert str(identifier) == "01234567-89ab-7102-8304-05060708090a"


def test_zero_timestamp_has_zero_time_bits():
    identifier = uuid7.generate_from_timestamp(0)
    high, _ = uuid7.halves(identifier)

    assert high >> 16 == 0
    assert uuid7.extract_timestamp_millis(identifier) == 0
    assert uuid7.extract_timestamp(identifier) == datetime(1970, 1, 1, tzinfo=UTC)


@pytest.mark.parametrize("timestamp", [-1, MAX_TIMESTAMP_MILLIS + 1, 2**63])
def test_out_of_range_timestamp_is_rejected(timestamp):
    with pytest.raises(ValueError, match="timestamp_millis"):
        uuid7.generate_from_timestamp(timestamp)


def test_short_random_source_is_rejected():
    generator = UuidGenerator(random_bytes=lambda n: b"\x00" * (n - 1))
    with pytest.raises(ValueError, match="random source"):
        generator.generate_from_timestamp(0)


def test_extract_timestamp_returns_utc_datetime():
    moment = datetime(2024, 2, 29, 12, 30, 15, 123000, tzinfo=UTC)
    identifier = uuid7.generate_at(moment)

    extracted = uuid7.extract_timestamp(identifier)
    assert extracted == moment
    assert extracted.tzinfo is UTC


def test_generate_at_truncates_sub_millisecond_precision():
    moment = datetime(2024, 1, 1, 0, 0, 0, 999_999, tzinfo=UTC)
    identifier = uuid7.generate_at(moment)
    assert uuid7.extract_timestamp(identifier) == moment.replace(microsecond=999_000)


def test_generate_at_reads_naive_as_utc_and_converts_offsets():
    naive = datetime(2024, 1, 1, 12, 0)
    shifted = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert uuid7.extract_timestamp_millis(
        uuid7.generate_at(naive)
    ) == uuid7.extract_timestamp_millis(uuid7.generate_at(shifted))


def test_extract_ignores_version_and_variant_of_foreign_ids():
    foreign = UUID("ffffffff-ffff-4fff-bfff-ffffffffffff")

    assert uuid7.extract_timestamp_millis(foreign) == MAX_TIMESTAMP_MILLIS
    assert not uuid7.is_uuid7(foreign)


def test_from_halves_rejects_wide_values():
    with pytest.raises(ValueError):
        uuid7.from_halves(1 << 64, 0)
