"""Tests for quadrant classification and occlusion recovery."""

import pytest

from golftrace.core.models import Box
from golftrace.tracking.occlusion import Quadrant, classify_quadrant, recover_head_box

CLUB = Box(0.5, 0.5, 0.2, 0.1)


class TestClassifyQuadrant:
    """Tests for classify_quadrant."""

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (0.6, 0.55, Quadrant.UPPER_RIGHT),
            (0.4, 0.55, Quadrant.UPPER_LEFT),
            (0.4, 0.45, Quadrant.LOWER_LEFT),
            (0.6, 0.45, Quadrant.LOWER_RIGHT),
        ],
    )
    def test_quadrants(self, x: float, y: float, expected: Quadrant) -> None:
        head = Box(x, y, 0.05, 0.05)
        assert classify_quadrant(head, CLUB, Quadrant.LOWER_LEFT) is expected

    def test_on_axis_keeps_previous(self) -> None:
        head = Box(0.5, 0.55, 0.05, 0.05)
        assert classify_quadrant(head, CLUB, Quadrant.LOWER_RIGHT) is Quadrant.LOWER_RIGHT


class TestRecoverHeadBox:
    """Tests for recover_head_box."""

    def test_quadrant_zero_offsets(self) -> None:
        last_head = Box(0.65, 0.55, 0.05, 0.05)
        anchor = Box(0.52, 0.5, 0.2, 0.1)
        box = recover_head_box(anchor, last_head, Quadrant.UPPER_RIGHT)

        assert box.center_x == pytest.approx(0.52 + 0.5 * (0.2 - 0.05))
        assert box.center_y == pytest.approx(0.5 + 0.5 * (0.1 - 0.05))
        assert (box.width, box.height) == (0.05, 0.05)

    @pytest.mark.parametrize("quadrant", list(Quadrant))
    def test_round_trip_direction(self, quadrant: Quadrant) -> None:
        """A recovered box sits in the same quadrant of the moved anchor."""
        last_head = Box(0.0, 0.0, 0.04, 0.03)
        moved = Box(0.31, 0.62, 0.25, 0.12)

        box = recover_head_box(moved, last_head, quadrant)
        assert classify_quadrant(box, moved, previous=Quadrant((quadrant + 1) % 4)) is quadrant

    def test_box_aligned_with_club_corner(self) -> None:
        last_head = Box(0.0, 0.0, 0.04, 0.04)
        box = recover_head_box(CLUB, last_head, Quadrant.LOWER_LEFT)

        # Lower-left corners coincide
        assert box.center_x - box.width / 2 == pytest.approx(CLUB.center_x - CLUB.width / 2)
        assert box.center_y - box.height / 2 == pytest.approx(CLUB.center_y - CLUB.height / 2)


def test_quadrant_signs() -> None:
    assert [q.signs for q in Quadrant] == [(1, 1), (-1, 1), (-1, -1), (1, -1)]
