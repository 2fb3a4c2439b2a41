import pytest

from fractonica import apogee, new_moon, nodal_ascending
from fractonica.ephemeris import decimal_to_octal
from fractonica.lunar_time import LunarEvent, LunarTime


def test_default_resolution_is_four_octal_digits():
    assert LunarTime().resolution == 8 ** 4


def test_custom_resolution():
    assert LunarTime(2, 10).resolution == 100


@pytest.mark.parametrize("event", list(LunarEvent))
def test_info_inside_table(event):
    info = LunarTime().event_info(1700000000, event)
    assert info.event is event
    assert 0 <= info.bin < 4096
    assert 0.0 < info.normalized < 1.0
    assert 0.0 <= info.progress <= 1.0
    assert info.bin_octal == decimal_to_octal(info.bin)


def test_midpoint_of_new_moon_period():
    stamps = new_moon.TIMESTAMPS
    mid = (stamps[20] + stamps[21]) // 2
    info = LunarTime().event_info(mid, LunarEvent.NEW_MOON)
    assert info.normalized == pytest.approx(0.5, abs=1e-6)
    assert info.bin in (2047, 2048)


def test_bins_advance_through_a_period():
    stamps = apogee.TIMESTAMPS
    lunar = LunarTime()
    start, end = stamps[50], stamps[51]
    bins = [
        lunar.event_info(start + (end - start) * k // 10, LunarEvent.APOGEE).bin
        for k in range(1, 10)
    ]
    assert bins == sorted(bins)
    assert len(set(bins)) == len(bins)


def test_exact_table_entry_yields_empty_info():
    info = LunarTime().event_info(nodal_ascending.TIMESTAMPS[10], LunarEvent.NODAL_ASCENDING)
    assert info.bin == 0
    assert info.normalized == 0.0
    assert info.progress == 0.0


def test_before_table_yields_empty_info():
    info = LunarTime().event_info(1000, LunarEvent.NEW_MOON)
    assert (info.bin, info.bin_octal, info.normalized) == (0, 0, 0.0)