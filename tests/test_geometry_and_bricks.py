"""Tests for arkanoid.geometry and arkanoid.bricks."""

from __future__ import annotations

from arkanoid.bricks import Brick, BrickField
from arkanoid.config import GameConfig
from arkanoid.geometry import boxes_overlap


class TestBoxesOverlap:
    """Bounding-square versus rectangle."""

    def test_inside(self) -> None:
        """A ball centred in the rectangle overlaps."""
        assert boxes_overlap(50, 50, 5, 40, 40, 20, 20)

    def test_edge_contact_is_not_overlap(self) -> None:
        """Touching edges do not count; the test is strict."""
        assert not boxes_overlap(35, 50, 5, 40, 40, 20, 20)
        assert not boxes_overlap(50, 65, 5, 40, 40, 20, 20)

    def test_just_inside_edge(self) -> None:
        """A hair past the edge overlaps."""
        assert boxes_overlap(35.01, 50, 5, 40, 40, 20, 20)

    def test_corner_counts_as_hit(self) -> None:
        """The square hull catches corners a true circle would miss."""
        # Centre is about 5.7 from the corner: outside the circle, inside its square
        assert boxes_overlap(36, 36, 5, 40, 40, 20, 20)

    def test_separate_on_one_axis(self) -> None:
        """Separation on either axis is enough."""
        assert not boxes_overlap(50, 10, 5, 40, 40, 20, 20)
        assert not boxes_overlap(100, 50, 5, 40, 40, 20, 20)


class TestBrickField:
    """Grid layout, kills and scanning order."""

    def test_reset_all_alive(self) -> None:
        """A fresh field is full."""
        field = BrickField(GameConfig())
        assert len(field.bricks()) == 45
        assert field.remaining_count() == 45
        assert all(b.alive for b in field.bricks())

    def test_layout(self) -> None:
        """Boxes follow col*(w+pad)+ox and row*(h+pad)+oy."""
        field = BrickField(GameConfig())
        assert field.brick(0, 0) == Brick(0, 0, 46, 56, 72, 22, True)
        assert field.box(2, 3) == (3 * 82 + 46, 2 * 32 + 56, 72, 22)
        assert field.box(4, 8) == (702, 184, 72, 22)

    def test_bricks_row_major(self) -> None:
        """bricks() walks rows first."""
        field = BrickField(GameConfig(brick_rows=2, brick_cols=3))
        assert [(b.row, b.col) for b in field.bricks()] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]

    def test_kill_at_idempotent(self) -> None:
        """Killing twice is safe and counted once."""
        field = BrickField(GameConfig())
        assert field.kill_at(1, 2) is True
        assert field.kill_at(1, 2) is False
        assert field.remaining_count() == 44
        assert not field.is_alive(1, 2)
        assert not field.brick(1, 2).alive

    def test_reset_revives(self) -> None:
        """reset() rebuilds a full grid."""
        field = BrickField(GameConfig())
        field.kill_at(0, 0)
        field.kill_at(4, 8)
        field.reset()
        assert field.remaining_count() == 45

    def test_alive_cells_skip_dead(self) -> None:
        """alive_cells() lists survivors in row-major order."""
        field = BrickField(GameConfig(brick_rows=2, brick_cols=2))
        field.kill_at(0, 1)
        assert field.alive_cells() == [(0, 0), (1, 0), (1, 1)]

    def test_first_overlap_prefers_lowest_row_then_column(self) -> None:
        """A ball touching four bricks resolves to (0, 0)."""
        field = BrickField(GameConfig())
        # Sits in the gap between columns 0/1 and rows 0/1
        hit = field.first_overlap(123, 83, 10)
        assert (hit.row, hit.col) == (0, 0)

    def test_first_overlap_skips_dead(self) -> None:
        """Dead bricks are transparent to the scan."""
        field = BrickField(GameConfig())
        field.kill_at(0, 0)
        hit = field.first_overlap(123, 83, 10)
        assert (hit.row, hit.col) == (0, 1)

    def test_first_overlap_none(self) -> None:
        """Open space hits nothing."""
        field = BrickField(GameConfig())
        assert field.first_overlap(410, 400, 10) is None
