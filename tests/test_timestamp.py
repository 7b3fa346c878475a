import time

from ttyutil.timestamp import freeze_timestamp, frozen_timestamp


def test_frozen_value_is_stable_without_freeze():
    freeze_timestamp()
    first = frozen_timestamp()
    time.sleep(0.02)
    assert frozen_timestamp() == first


def test_freeze_advances_clock():
    freeze_timestamp()
    before = frozen_timestamp()
    time.sleep(0.05)
    freeze_timestamp()
    after = frozen_timestamp()
    assert after - before >= 40


def test_clock_never_goes_backwards():
    readings = []
    for _ in range(50):
        freeze_timestamp()
        readings.append(frozen_timestamp())
    assert readings == sorted(readings)
    assert all(isinstance(r, int) and r >= 0 for r in readings)