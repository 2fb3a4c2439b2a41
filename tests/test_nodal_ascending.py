from fractonica import nodal_ascending
from fractonica.ephemeris import fraction_at


def test_table_has_declared_count():
    assert len(nodal_ascending.TIMESTAMPS) == nodal_ascending.COUNT
    assert len(nodal_ascending.source()) == 512


def test_table_starts_at_epoch():
    assert nodal_ascending.source().timestamp(0) == nodal_ascending.EPOCH
    assert nodal_ascending.TIMESTAMPS[-1] == 2464950733


def test_table_is_strictly_increasing():
    stamps = nodal_ascending.source().timestamps
    assert len(stamps) == 512
    assert all(a < b for a, b in zip(stamps, stamps[1:]))


def test_average_period_matches_table():
    src = nodal_ascending.source()
    average = (src.timestamp(len(src) - 1) - src.timestamp(0)) / (len(src) - 1)
    assert abs(average - nodal_ascending.AVERAGE_PERIOD) < 1


def test_source_is_cached():
    first = nodal_ascending.source()
    second = nodal_ascending.source()
    assert second is first
    assert second.timestamp(1) == 1265864275


def test_fraction_inside_table_is_valid():
    stamps = nodal_ascending.TIMESTAMPS
    ts = (stamps[100] + stamps[101]) // 2
    result = fraction_at(nodal_ascending.source(), ts, 4096)
    assert result.valid
    assert result.past_index == 100
    assert result.future_index == 101
    assert 0 <= result.bin < 4096