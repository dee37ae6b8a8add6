"""
Padded influence grid, terrain seeding and the radial "bloom" applicator.

The grid has one extra row and column on every side for the off-board
border, so the four neighbours of any board cell are always addressable.
"""

import typing

from bloomsnake.config import Weights
from bloomsnake.snapshot import GridCoordinate


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, for negative numerators too."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class InfluenceGrid:
    """(height + 2) x (width + 2) scores indexed as grid[gy][gx]."""

    def __init__(self, width: int, height: int, fill: int = 0):
        self.width = width
        self.height = height
        self.cells = [[fill] * (width + 2) for _ in range(height + 2)]

    @property
    def grid_width(self) -> int:
        return self.width + 2

    @property
    def grid_height(self) -> int:
        return self.height + 2

    @property
    def center(self) -> GridCoordinate:
        return GridCoordinate(self.width // 2 + 1, self.height // 2 + 1)

    def in_bounds(self, gx: int, gy: int) -> bool:
        return 0 <= gx < self.width + 2 and 0 <= gy < self.height + 2

    def is_border(self, gx: int, gy: int) -> bool:
        return gx == 0 or gy == 0 or gx == self.width + 1 or gy == self.height + 1

    def __getitem__(self, cell: GridCoordinate) -> int:
        gx, gy = cell
        return self.cells[gy][gx]

    def add(self, cell: GridCoordinate, amount: int):
        gx, gy = cell
        if self.in_bounds(gx, gy):
            self.cells[gy][gx] += amount

    def copy(self) -> "InfluenceGrid":
        clone = InfluenceGrid(self.width, self.height)
        clone.cells = [list(row) for row in self.cells]
        return clone

    def __iter__(self) -> typing.Iterator[typing.Tuple[GridCoordinate, int]]:
        for gy, row in enumerate(self.cells):
            for gx, value in enumerate(row):
                yield GridCoordinate(gx, gy), value


def squared_distance(a: GridCoordinate, b: GridCoordinate) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def initialize_terrain(width: int, height: int, weights: Weights = None) -> InfluenceGrid:
    """
    Seed every cell with its base desirability.

    Border cells get the wall weight. Inside the board, cells within the
    inner disc around the center get one of three reward tiers (bullseye,
    center, ring) and everything outside it gets the corner penalty.
    """
    weights = weights or Weights()
    grid = InfluenceGrid(width, height)
    center = grid.center
    inner_disc = (width // 2 - 1) ** 2
    center_disc = (width // 4) ** 2

    for gy in range(grid.grid_height):
        for gx in range(grid.grid_width):
            if grid.is_border(gx, gy):
                # rule out going off the board
                grid.cells[gy][gx] = weights.walls
                continue

            dist = squared_distance((gx, gy), center)
            if dist <= inner_disc:
                if dist <= 1:
                    grid.cells[gy][gx] = weights.bullseye
                elif dist < center_disc:
                    grid.cells[gy][gx] = weights.center
                else:
                    grid.cells[gy][gx] = weights.ring
            else:
                grid.cells[gy][gx] = weights.corners

    return grid


def bloom(center: GridCoordinate, power: int, spread: int, grid: InfluenceGrid):
    """
    Add a decaying disc of influence around center.

    Candidates span [c - spread, c + spread) on each axis; the upper bound is
    exclusive so the footprint leans toward lower coordinates. A candidate at
    squared distance d2 falls in the first ring r (0..spread) with
    d2 <= r * r and receives power / (r + 1), truncated toward zero. Cells
    beyond the last ring and cells outside the grid receive nothing.
    """
    if power == 0 or spread <= 0:
        return

    cx, cy = center
    reach = spread * spread
    for gy in range(cy - spread, cy + spread):
        for gx in range(cx - spread, cx + spread):
            if not grid.in_bounds(gx, gy):
                continue
            dist = (gx - cx) ** 2 + (gy - cy) ** 2
            if dist > reach:
                continue
            ring = 0
            while ring * ring < dist:
                ring += 1
            grid.cells[gy][gx] += trunc_div(power, ring + 1)
