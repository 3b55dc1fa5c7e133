import queue

import pytest

from trackerkit.data import BatteryMonitor, DeviceState, Gps, GpsQueue, LocalGps


def test_queue_holds_one_less_than_capacity():
    q = GpsQueue(4)
    for n in range(3):
        q.enqueue(Gps(timestamp=n))
    assert q.is_full()
    assert len(q) == 3
    with pytest.raises(queue.Full):
        q.enqueue(Gps())


def test_queue_is_fifo():
    q = GpsQueue(5)
    for n in range(4):
        q.enqueue(Gps(timestamp=n, speed=float(n)))
    assert [q.dequeue().timestamp for _ in range(4)] == [0, 1, 2, 3]
    assert q.is_empty()


def test_dequeue_empty_raises():
    q = GpsQueue(3)
    with pytest.raises(queue.Empty):
        q.dequeue()


def test_queue_wraps_around():
    q = GpsQueue(3)
    for n in range(10):
        q.enqueue(Gps(timestamp=n))
        assert q.dequeue().timestamp == n
    assert len(q) == 0


def test_queue_stores_a_copy():
    q = GpsQueue(3)
    fix = Gps(timestamp=7, latitude=1.5)
    q.enqueue(fix)
    fix.latitude = 99.0
    assert q.dequeue().latitude == 1.5


def test_queue_capacity_too_small():
    with pytest.raises(ValueError):
        GpsQueue(1)


def test_battery_zero_is_empty():
    monitor = BatteryMonitor(4)
    assert monitor.percent() == 0


def test_battery_percent_in_range_and_monotonic_within_band():
    results = []
    for raw in range(1200, 1580, 20):
        monitor = BatteryMonitor(1)
        monitor.store_voltage(raw)
        results.append(monitor.percent())
    assert all(0 <= p <= 100 for p in results)
    assert results == sorted(results)


def test_battery_ring_overwrites_oldest():
    overwritten = BatteryMonitor(2)
    for raw in (0, 0, 1400):
        overwritten.store_voltage(raw)
    direct = BatteryMonitor(2)
    direct.store_voltage(1400)
    direct.store_voltage(0)
    assert overwritten.percent() == direct.percent()


def test_battery_miles_zero():
    assert BatteryMonitor().miles() == 0


def test_battery_rejects_no_samples():
    with pytest.raises(ValueError):
        BatteryMonitor(0)


def test_vibration_counter():
    state = DeviceState()
    assert state.tick_vibration() == 0
    assert state.tick_vibration() == 1
    assert state.vibration_time == 2
    assert state.reset_vibration() == 0
    assert state.vibration_time == 0


def test_save_last_gps_fix():
    state = DeviceState()
    fix = LocalGps(is_gps=True, gps=Gps(timestamp=5, longitude=2.0))
    state.save_last_gps(fix)
    fix.gps.longitude = 3.0
    assert state.last_gps.is_gps
    assert state.last_gps.gps.longitude == 2.0
    assert state.last_gps.gps.timestamp == 5


def test_save_last_cell_keeps_previous_fix():
    state = DeviceState()
    state.save_last_gps(LocalGps(is_gps=True, gps=Gps(timestamp=9)))
    state.save_last_gps(LocalGps(is_gps=False, cell_info={"cell": 1}))
    assert not state.last_gps.is_gps
    assert state.last_gps.cell_info == {"cell": 1}
    assert state.last_gps.gps.timestamp == 9


def test_itinerary_state_toggles():
    state = DeviceState()
    assert state.itinerary_started is False
    state.itinerary_started = True
    assert state.itinerary_started is True