import logging
import typing

from bloomsnake.config import DIRECTION_DELTAS, DIRECTIONS, Weights
from bloomsnake.grid import InfluenceGrid, bloom, squared_distance, trunc_div
from bloomsnake.snapshot import GameSnapshot, GridCoordinate

logger = logging.getLogger(__name__)


class SnakeBehavior:
    """
    Accumulation passes over the influence grid and the final move choice.

    Each pass mutates the grid in place; none of them keeps state between
    turns.
    """

    @staticmethod
    def neighbors(head: GridCoordinate) -> typing.Dict[str, GridCoordinate]:
        # ordered by direction priority
        cells = {}
        for move in DIRECTIONS:
            dx, dy = DIRECTION_DELTAS[move]
            cells[move] = GridCoordinate(head[0] + dx, head[1] + dy)
        return cells

    @staticmethod
    def apply_snake_hazards(snapshot: GameSnapshot, grid: InfluenceGrid, weights: Weights):

        # Pursue weaker heads, avoid every other segment.
        me = snapshot.you
        for snake in snapshot.snakes:
            is_me = snake.id == me.id
            threat = max(1, snake.length - me.length)
            for i, coord in enumerate(snake.body):
                if i == 0 and is_me:
                    continue
                if i == 0 and snake.length < me.length:
                    bloom(coord, weights.pursue_head, weights.pursue_spread, grid)
                    continue
                grid.add(coord, weights.occupied)
                bloom(coord, trunc_div(weights.avoid * threat, i + 1), weights.avoid_spread, grid)

    @staticmethod
    def is_hungry(snapshot: GameSnapshot, weights: Weights) -> bool:
        me = snapshot.you
        if me.health < weights.hungry_health:
            return True
        opponents = snapshot.opponents
        if not opponents:
            return False
        # margin widens with every snake on the board, ourselves included
        return me.length < max(snake.length for snake in opponents) + len(snapshot.snakes)

    @staticmethod
    def apply_food_incentive(snapshot: GameSnapshot, grid: InfluenceGrid, weights: Weights) -> bool:

        # Food only matters when hungry.
        if not SnakeBehavior.is_hungry(snapshot, weights):
            return False
        for food in snapshot.food:
            bloom(food, weights.food, weights.food_spread, grid)
        return True

    @staticmethod
    def apply_center_bias(snapshot: GameSnapshot, grid: InfluenceGrid, weights: Weights) -> str:

        # Nudge the neighbour closest to the center.
        center = grid.center
        candidates = SnakeBehavior.neighbors(snapshot.you.head)
        best_move = DIRECTIONS[0]
        best_dist = None
        for move, cell in candidates.items():
            dist = squared_distance(cell, center)
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best_move = move
        bloom(candidates[best_move], weights.steer, weights.steer_spread, grid)
        return best_move

    @staticmethod
    def neighbor_scores(snapshot: GameSnapshot, grid: InfluenceGrid) -> typing.Dict[str, int]:
        # The padding guarantees every neighbour of a board cell is in the grid.
        return {move: grid[cell] for move, cell in SnakeBehavior.neighbors(snapshot.you.head).items()}

    @staticmethod
    def select_move(snapshot: GameSnapshot, grid: InfluenceGrid) -> str:
        """
        Pick the neighbour with the highest score.

        Ties go to the earliest direction in up, down, left, right order. A
        direction is always returned, even when every neighbour is a wall.
        """
        scores = SnakeBehavior.neighbor_scores(snapshot, grid)
        next_move = DIRECTIONS[0]
        for move in DIRECTIONS:
            if scores[move] > scores[next_move]:
                next_move = move
        logger.debug("neighbour scores %s -> %s", scores, next_move)
        return next_move
