import time

from philodine.clock import now_ms


def test_now_ms_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(now_ms() - reference) < 1000


def test_now_ms_is_whole_milliseconds():
    value = now_ms()
    assert value == int(value)


def test_now_ms_advances_with_sleep():
    before = now_ms()
    time.sleep(0.05)
    after = now_ms()
    assert after - before >= 49