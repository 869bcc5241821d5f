"""Tests for the default factory catalog and its generators."""

from __future__ import annotations

import datetime
import random
import zoneinfo

import pytest

from instantiator.descriptor import TypeDescriptor
from instantiator.factories import (
    DEFAULT_INSTANCE_FACTORIES,
    DEFAULT_TYPES,
    NonNullableInstanceFactory,
    NullableInstanceFactory,
    NullableWrapperFactory,
)
from instantiator.factories import primitives, temporal
from instantiator.tags import (
    Char,
    Float32,
    Instant,
    Int8,
    Int16,
    Int64,
    LegacyDate,
    OffsetDateTime,
    OffsetTime,
    ZonedDateTime,
)

SAMPLES = 300


def _samples(func, seed: int = 0, n: int = SAMPLES) -> list:
    rng = random.Random(seed)
    return [func(rng) for _ in range(n)]


class TestCatalog:
    def test_seventeen_leaf_types(self):
        assert len(DEFAULT_TYPES) == 17
        assert len(set(DEFAULT_TYPES)) == 17

    def test_pairs_for_every_type(self):
        assert len(DEFAULT_INSTANCE_FACTORIES) == 2 * len(DEFAULT_TYPES)
        descriptors = {f.descriptor for f in DEFAULT_INSTANCE_FACTORIES}
        for base in DEFAULT_TYPES:
            assert TypeDescriptor(base) in descriptors
            assert TypeDescriptor(base, nullable=True) in descriptors

    def test_variants_match_descriptors(self):
        for factory in DEFAULT_INSTANCE_FACTORIES:
            if factory.descriptor.nullable:
                assert isinstance(factory, NullableInstanceFactory)
            else:
                assert isinstance(factory, NonNullableInstanceFactory)

    def test_nullable_defaults_wrap_non_nullable_defaults(self):
        for non_nullable, wrapper in zip(
            DEFAULT_INSTANCE_FACTORIES[::2], DEFAULT_INSTANCE_FACTORIES[1::2]
        ):
            assert isinstance(wrapper, NullableWrapperFactory)
            assert wrapper.wrapped is non_nullable

    def test_expected_types(self):
        expected = {
            int,
            bool,
            Float32,
            float,
            Int64,
            Int16,
            Int8,
            str,
            Char,
            LegacyDate,
            Instant,
            datetime.datetime,
            datetime.date,
            datetime.time,
            ZonedDateTime,
            OffsetDateTime,
            OffsetTime,
        }
        assert set(DEFAULT_TYPES) == expected

    @pytest.mark.parametrize("factory", DEFAULT_INSTANCE_FACTORIES[::2], ids=str)
    def test_non_nullable_never_none(self, factory):
        rng = random.Random(5)
        assert all(factory.create_instance(rng) is not None for _ in range(50))


class TestPrimitives:
    def test_int_is_32_bit(self):
        values = _samples(primitives.random_int)
        assert all(-(2**31) <= v < 2**31 for v in values)
        assert any(v < 0 for v in values)

    def test_bool(self):
        values = _samples(primitives.random_bool)
        assert set(values) == {True, False}

    def test_float32_in_unit_interval_and_single_precision(self):
        for v in _samples(primitives.random_float32):
            assert 0.0 <= v < 1.0
            assert (v * 2**24).is_integer()

    def test_float_in_unit_interval(self):
        assert all(0.0 <= v < 1.0 for v in _samples(primitives.random_float))

    def test_int64_range(self):
        values = _samples(primitives.random_int64)
        assert all(-(2**63) <= v < 2**63 for v in values)
        assert any(abs(v) > 2**32 for v in values)

    def test_int16_range(self):
        assert all(0 <= v < 2**15 - 1 for v in _samples(primitives.random_int16))

    def test_int8_signed_byte(self):
        values = _samples(primitives.random_int8, n=2000)
        assert all(-128 <= v <= 127 for v in values)
        assert min(values) < 0 < max(values)

    def test_string_length_and_alphabet(self):
        for s in _samples(primitives.random_str):
            assert len(s) == primitives.STRING_LENGTH == 10
            assert set(s) <= set(primitives.CHAR_POOL)

    def test_string_reaches_whole_alphabet(self):
        seen = set("".join(_samples(primitives.random_str, n=500)))
        assert seen == set(primitives.CHAR_POOL)

    def test_char_pool_size(self):
        assert len(primitives.CHAR_POOL) == 62
        assert len(set(primitives.CHAR_POOL)) == 62

    def test_char_is_single_symbol(self):
        for c in _samples(primitives.random_char):
            assert len(c) == 1
            assert c in primitives.CHAR_POOL


class TestTemporal:
    def test_zone_ids_sorted_and_nonempty(self):
        zone_ids = temporal.available_zone_ids()
        assert zone_ids
        assert list(zone_ids) == sorted(zone_ids)
        assert "UTC" in zone_ids or "Etc/UTC" in zone_ids

    def test_instant_is_utc_and_bounded(self):
        upper = temporal.EPOCH + datetime.timedelta(milliseconds=temporal.MAX_INSTANT_MILLIS)
        for v in _samples(temporal.random_instant):
            assert v.tzinfo is datetime.timezone.utc
            assert temporal.EPOCH <= v < upper
            assert v.microsecond % 1000 == 0

    def test_legacy_date_is_64_bit_millis(self):
        assert all(-(2**63) <= v < 2**63 for v in _samples(temporal.random_legacy_date))

    def test_local_datetime_is_naive(self):
        for v in _samples(temporal.random_local_datetime, n=100):
            assert isinstance(v, datetime.datetime)
            assert v.tzinfo is None
            assert 1969 <= v.year <= 2100

    def test_local_date_projects_local_datetime(self):
        a = temporal.random_local_datetime(random.Random(9))
        b = temporal.random_local_date(random.Random(9))
        assert type(b) is datetime.date
        assert b == a.date()

    def test_local_time_projects_local_datetime(self):
        a = temporal.random_local_datetime(random.Random(9))
        b = temporal.random_local_time(random.Random(9))
        assert b == a.time()
        assert b.tzinfo is None

    def test_zoned_datetime_reuses_local_datetime(self):
        local = temporal.random_local_datetime(random.Random(11))
        zoned = temporal.random_zoned_datetime(random.Random(11))
        assert isinstance(zoned.tzinfo, zoneinfo.ZoneInfo)
        assert zoned.replace(tzinfo=None) == local

    def test_offset_datetime_offset_range(self):
        for v in _samples(temporal.random_offset_datetime, n=100):
            offset = v.utcoffset()
            assert offset is not None
            assert (
                temporal.MIN_OFFSET_SECONDS
                <= offset.total_seconds()
                < temporal.MAX_OFFSET_SECONDS
            )

    def test_offset_datetime_reuses_local_datetime(self):
        local = temporal.random_local_datetime(random.Random(13))
        offset_dt = temporal.random_offset_datetime(random.Random(13))
        assert offset_dt.replace(tzinfo=None) == local

    def test_offset_time_projects_offset_datetime(self):
        offset_dt = temporal.random_offset_datetime(random.Random(17))
        offset_time = temporal.random_offset_time(random.Random(17))
        assert offset_time == offset_dt.timetz()
        assert offset_time.tzinfo is not None

    def test_seeded_determinism(self):
        assert _samples(temporal.random_zoned_datetime, seed=3, n=20) == _samples(
            temporal.random_zoned_datetime, seed=3, n=20
        )
