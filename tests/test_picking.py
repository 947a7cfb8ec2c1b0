import pytest

from tri_viewer.errors import InvalidConfigurationError
from tri_viewer.geometry.picking import pick_vertex

POINTS = [(50.0, 250.0), (56.0, 250.0), (50.0, 50.0)]


def test_first_hit_wins_over_nearest():
    assert pick_vertex((55.0, 250.0), POINTS, 10) == 0


def test_nearest_option_prefers_closest_hit():
    assert pick_vertex((55.0, 250.0), POINTS, 10, nearest=True) == 1


def test_radius_is_exclusive():
    assert pick_vertex((60.0, 50.0), POINTS, 10) is None
    assert pick_vertex((59.9, 50.0), POINTS, 10) == 2


def test_miss_returns_none():
    assert pick_vertex((200.0, 150.0), POINTS) is None


def test_non_positive_radius_rejected():
    with pytest.raises(InvalidConfigurationError):
        pick_vertex((0.0, 0.0), POINTS, 0)
