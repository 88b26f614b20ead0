"""Quadrant bookkeeping and head synthesis for occluded frames."""

from enum import IntEnum

from golftrace.core.models import Box


class Quadrant(IntEnum):
    """Direction of the head from the club center (y axis points up)."""

    UPPER_RIGHT = 0  # head x > club x, head y > club y
    UPPER_LEFT = 1  # x <, y >
    LOWER_LEFT = 2  # x <, y <
    LOWER_RIGHT = 3  # x >, y <

    @property
    def signs(self) -> tuple[int, int]:
        """Unit (sx, sy) direction for this quadrant."""
        return _SIGNS[self]


_SIGNS = {
    Quadrant.UPPER_RIGHT: (1, 1),
    Quadrant.UPPER_LEFT: (-1, 1),
    Quadrant.LOWER_LEFT: (-1, -1),
    Quadrant.LOWER_RIGHT: (1, -1),
}


def classify_quadrant(head: Box, club: Box, previous: Quadrant) -> Quadrant:
    """
    Quadrant of the head center relative to the club center.

    A head lying exactly on either club axis is ambiguous and keeps the
    previous quadrant.
    """
    dx = head.center_x - club.center_x
    dy = head.center_y - club.center_y
    if dx == 0 or dy == 0:
        return previous
    if dx > 0:
        return Quadrant.UPPER_RIGHT if dy > 0 else Quadrant.LOWER_RIGHT
    return Quadrant.UPPER_LEFT if dy > 0 else Quadrant.LOWER_LEFT


def recover_head_box(club: Box, last_head: Box, quadrant: Quadrant) -> Box:
    """
    Place a head box in the given quadrant corner of the club box.

    The synthesized box keeps the last head's size; its center sits half the
    size difference away from the club center in the quadrant's direction,
    so the head box lines up with that corner of the club box.
    """
    sx, sy = quadrant.signs
    return Box(
        center_x=club.center_x + sx * 0.5 * (club.width - last_head.width),
        center_y=club.center_y + sy * 0.5 * (club.height - last_head.height),
        width=last_head.width,
        height=last_head.height,
    )
