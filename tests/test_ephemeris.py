import struct

import pytest

from fractonica.ephemeris import (
    HEADER_SIZE,
    MAGIC,
    EphemerisError,
    EphemerisFile,
    EphemerisHeader,
    EphemerisWindow,
    MemorySource,
    SearchResult,
    decimal_to_octal,
    find_closest,
    fraction_at,
)


def _write_file(path, timestamps, count=None):
    count = len(timestamps) if count is None else count
    data = struct.pack("<IIQ", MAGIC, count, 0)
    data += b"".join(struct.pack("<q", t) for t in timestamps)
    path.write_bytes(data)
    return path


def test_header_round_trip():
    header = EphemerisHeader(MAGIC, 512, 7)
    packed = header.pack()
    assert len(packed) == HEADER_SIZE
    assert EphemerisHeader.parse(packed) == header


def test_header_magic_spells_frac():
    assert EphemerisHeader(MAGIC, 0).pack()[:4] == b"FRAC"
    assert EphemerisHeader(MAGIC, 0).has_valid_magic


def test_header_parse_rejects_short_data():
    with pytest.raises(EphemerisError):
        EphemerisHeader.parse(b"FRAC")


def test_file_reads_header_and_timestamps(tmp_path):
    stamps = [1263539508, -5, 2567327387]
    path = _write_file(tmp_path / "e.bin", stamps)
    with EphemerisFile(path) as eph:
        assert eph.header.magic == MAGIC
        assert eph.header.entry_count == 3
        assert len(eph) == 3
        assert [eph.timestamp(i) for i in range(3)] == stamps


def test_file_index_out_of_range(tmp_path):
    path = _write_file(tmp_path / "e.bin", [1, 2])
    with EphemerisFile(path) as eph:
        with pytest.raises(IndexError):
            eph.timestamp(2)
        with pytest.raises(IndexError):
            eph.timestamp(-1)


def test_file_truncated_entry(tmp_path):
    path = _write_file(tmp_path / "e.bin", [1], count=2)
    with EphemerisFile(path) as eph:
        with pytest.raises(EphemerisError):
            eph.timestamp(1)


def test_file_short_header(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"FRAC\x00")
    with pytest.raises(EphemerisError):
        EphemerisFile(path)


def test_file_closed_after_context(tmp_path):
    path = _write_file(tmp_path / "e.bin", [1, 2])
    with EphemerisFile(path) as eph:
        pass
    with pytest.raises(EphemerisError):
        eph.timestamp(0)


def test_memory_source_access():
    src = MemorySource([10, 20, 30])
    assert len(src) == 3
    assert src.timestamp(1) == 20
    with pytest.raises(IndexError):
        src.timestamp(3)


@pytest.mark.parametrize(
    "ts, expected",
    [
        (5, SearchResult(None, 0)),
        (35, SearchResult(2, None)),
        (20, SearchResult(1, 1)),
        (25, SearchResult(1, 2)),
        (10, SearchResult(0, 0)),
        (30, SearchResult(2, 2)),
    ],
)
def test_find_closest(ts, expected):
    assert find_closest(MemorySource([10, 20, 30]), ts) == expected


def test_find_closest_empty_source():
    result = find_closest(MemorySource([]), 5)
    assert not result.found_past and not result.found_future


def test_find_closest_brackets_timestamp():
    src = MemorySource(range(0, 1000, 37))
    for ts in range(1, 960, 13):
        r = find_closest(src, ts)
        assert src.timestamp(r.past_index) <= ts <= src.timestamp(r.future_index)


def test_decimal_to_octal_pinned():
    assert decimal_to_octal(8) == 10
    assert decimal_to_octal(0) == 0


@pytest.mark.parametrize("n", [1, 7, 63, 64, 511, 4095])
def test_decimal_to_octal_round_trip(n):
    assert int(str(decimal_to_octal(n)), 8) == n


def test_decimal_to_octal_rejects_negative():
    with pytest.raises(ValueError):
        decimal_to_octal(-1)


def test_fraction_at_window_start_and_end():
    src = MemorySource([0, 100, 250])
    start = fraction_at(src, 1, 16)
    assert start.valid and start.bin == 0
    end = fraction_at(src, 249, 16)
    assert end.valid and end.bin == 15
    assert end.past_index == 1 and end.future_index == 2


def test_fraction_at_normalized_matches_position():
    src = MemorySource([1000, 2000])
    fr = fraction_at(src, 1250, 64)
    assert fr.normalized == pytest.approx((1250 - 1000) / (2000 - 1000))
    assert 0.0 <= fr.progress <= 1.0
    assert fr.bin_octal == decimal_to_octal(fr.bin)


def test_fraction_at_bins_are_monotonic():
    src = MemorySource([0, 4096])
    bins = [fraction_at(src, ts, 512).bin for ts in range(1, 4096, 7)]
    assert bins == sorted(bins)
    assert all(0 <= b < 512 for b in bins)


def test_fraction_at_exact_interior_match_is_invalid():
    assert not fraction_at(MemorySource([0, 100, 200]), 100, 8).valid


def test_fraction_at_outside_range_is_invalid():
    src = MemorySource([100, 200])
    before = fraction_at(src, 50, 8)
    assert not before.valid and before.future_index == 0
    after = fraction_at(src, 250, 8)
    assert not after.valid and after.past_index == 1


def test_fraction_at_too_few_entries_is_invalid():
    assert not fraction_at(MemorySource([100]), 100, 8).valid


def test_fraction_at_rejects_zero_resolution():
    with pytest.raises(ValueError):
        fraction_at(MemorySource([0, 100]), 50, 0)


def test_fraction_at_fills_window():
    window = EphemerisWindow()
    fraction_at(MemorySource([0, 100, 200]), 150, 8, window)
    assert (window.start, window.end) == (100, 200)


def test_fraction_at_uses_cached_window():
    window = EphemerisWindow(0, 100)
    cached = fraction_at(MemorySource([0, 1000]), 50, 8, window)
    direct = fraction_at(MemorySource([0, 100]), 50, 8)
    assert cached.normalized == direct.normalized
    assert cached.bin == direct.bin
    assert (window.start, window.end) == (0, 100)