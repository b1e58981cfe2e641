import pytest

from chunkken.camera import CameraRig, finterp_to


def test_defaults_match_spring_arm_setup():
    rig = CameraRig()
    assert rig.arm_length == 1200.0
    assert (rig.min_distance, rig.max_distance) == (800.0, 2000.0)
    assert rig.zoom_speed == 5.0


def test_finterp_non_positive_speed_jumps_to_target():
    assert finterp_to(3.0, 42.0, 0.016, 0.0) == 42.0
    assert finterp_to(3.0, 42.0, 0.016, -1.0) == 42.0


def test_finterp_large_step_reaches_target():
    assert finterp_to(0.0, 10.0, 1.0, 5.0) == 10.0


def test_finterp_tiny_gap_snaps_to_target():
    assert finterp_to(10.0, 10.00001, 0.01, 1.0) == 10.00001


def test_finterp_moves_partway_without_overshoot():
    value = finterp_to(0.0, 10.0, 0.1, 5.0)
    assert value == pytest.approx(5.0)
    assert 0.0 < value < 10.0


def test_update_position_is_midpoint():
    rig = CameraRig()
    location = rig.update_position((0.0, -100.0, 10.0), (0.0, 300.0, 30.0))
    assert location == (0.0, 100.0, 20.0)
    assert rig.location == location


def test_update_position_without_players_keeps_location():
    rig = CameraRig(location=(1.0, 2.0, 3.0))
    assert rig.update_position(None, (0.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)


def test_zoom_clamps_to_minimum_when_close():
    rig = CameraRig()
    for _ in range(200):
        rig.update_zoom((0.0, 0.0, 0.0), (0.0, 10.0, 0.0), 0.1)
    assert rig.arm_length == pytest.approx(rig.min_distance)


def test_zoom_clamps_to_maximum_when_far():
    rig = CameraRig()
    for _ in range(200):
        rig.update_zoom((0.0, 0.0, 0.0), (0.0, 5000.0, 0.0), 0.1)
    assert rig.arm_length == pytest.approx(rig.max_distance)


def test_zoom_follows_distance_inside_range():
    rig = CameraRig()
    for _ in range(200):
        rig.update_zoom((0.0, 0.0, 0.0), (0.0, 1500.0, 0.0), 0.1)
    assert rig.arm_length == pytest.approx(1500.0)


def test_zoom_moves_monotonically_toward_target():
    rig = CameraRig()
    first = rig.update_zoom((0.0, 0.0, 0.0), (0.0, 2000.0, 0.0), 0.016)
    second = rig.update_zoom((0.0, 0.0, 0.0), (0.0, 2000.0, 0.0), 0.016)
    assert 1200.0 < first < second <= 2000.0


def test_tick_without_both_players_changes_nothing():
    rig = CameraRig()
    rig.tick((0.0, 0.0, 0.0), None, 0.1)
    assert rig.arm_length == 1200.0
    assert rig.location == (0.0, 0.0, 0.0)


def test_tick_updates_position_and_zoom():
    rig = CameraRig()
    rig.tick((0.0, 0.0, 0.0), (0.0, 400.0, 0.0), 0.05)
    assert rig.location == (0.0, 200.0, 0.0)
    assert rig.min_distance <= rig.arm_length < 1200.0