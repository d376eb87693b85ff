import numpy as np
import pytest

from aimlab.targets import (
    DEFAULT_TARGET_POSITIONS,
    Target,
    TargetSlots,
    generate_random_number,
)
from aimlab.vector import Vec3


def test_random_number_stays_in_half_open_range():
    values = {generate_random_number(2, 6) for _ in range(500)}
    assert values <= {2, 3, 4, 5}


def test_random_number_single_value_range():
    assert all(generate_random_number(5, 6) == 5 for _ in range(20))


def test_random_number_empty_range_raises():
    with pytest.raises(ValueError):
        generate_random_number(3, 3)


def test_default_slots_hold_the_nine_grid_positions():
    slots = TargetSlots()
    assert len(slots) == 9
    assert list(slots) == list(DEFAULT_TARGET_POSITIONS)


def test_take_and_give_back():
    slots = TargetSlots([Vec3(1.0, 0.0, 0.0), Vec3(2.0, 0.0, 0.0)])
    taken = slots.take(1)
    assert taken == Vec3(2.0, 0.0, 0.0)
    assert list(slots) == [Vec3(1.0, 0.0, 0.0)]
    slots.give_back(taken)
    assert list(slots) == [Vec3(1.0, 0.0, 0.0), Vec3(2.0, 0.0, 0.0)]


def test_take_out_of_range_raises():
    with pytest.raises(IndexError):
        TargetSlots([]).take(0)


def test_target_model_matrix_translates_to_position():
    target = Target(Vec3(3.0, -3.0, -10.0), TargetSlots([]))
    assert np.allclose(target.model_matrix[:3, 3], [3.0, -3.0, -10.0])


def test_shot_straight_at_target_hits():
    target = Target(Vec3(0.0, 0.0, -10.0), TargetSlots([]))
    assert target.on_mouse_click(Vec3(), Vec3(0.0, 0.0, -1.0)) is True


def test_shot_away_from_target_misses():
    target = Target(Vec3(0.0, 0.0, -10.0), TargetSlots([]))
    assert target.on_mouse_click(Vec3(), Vec3(0.0, 0.0, 1.0)) is False


def test_shot_past_offset_target_misses():
    target = Target(Vec3(3.0, 3.0, -10.0), TargetSlots([]))
    assert target.on_mouse_click(Vec3(), Vec3(0.0, 0.0, -1.0)) is False


def test_clone_takes_a_free_position():
    slots = TargetSlots()
    before = list(slots)
    original = Target(slots.take(0), slots)
    clone = original.clone()
    assert clone.position in before
    assert clone.position not in slots
    assert len(slots) == len(before) - 2
    assert clone.slots is slots


def test_clone_with_no_free_positions_raises():
    target = Target(Vec3(), TargetSlots([]))
    with pytest.raises(IndexError):
        target.clone()


def test_destroy_frees_position():
    slots = TargetSlots([])
    target = Target(Vec3(1.0, 2.0, 3.0), slots)
    target.destroy()
    assert target.is_destroyed is True
    assert list(slots) == [Vec3(1.0, 2.0, 3.0)]