"""
Immutable per-turn view of a Battlesnake game state.

Board coordinates are 0-indexed from the bottom-left corner. The influence
grid is padded by one cell on every side, so every board cell (x, y) maps to
the grid cell (x + 1, y + 1) and index 0 / size + 1 is off the board.
"""

from dataclasses import dataclass
import typing


class Coordinate(typing.NamedTuple):
    x: int
    y: int

    def to_grid(self) -> "GridCoordinate":
        return GridCoordinate(self.x + 1, self.y + 1)


class GridCoordinate(typing.NamedTuple):
    gx: int
    gy: int

    def to_board(self) -> Coordinate:
        return Coordinate(self.gx - 1, self.gy - 1)


@dataclass(frozen=True)
class SnakeBody:
    """
    One snake on the board.

    ``body`` is the ground truth for occupancy and ``length`` for strength
    comparisons; the two can disagree while segments are stacked.
    """

    id: str
    name: str
    body: typing.Tuple[GridCoordinate, ...]
    length: int
    health: int = 100

    @property
    def head(self) -> GridCoordinate:
        return self.body[0]


@dataclass(frozen=True)
class GameSnapshot:
    game_id: str
    turn: int
    width: int
    height: int
    snakes: typing.Tuple[SnakeBody, ...]
    food: typing.Tuple[GridCoordinate, ...]
    you_id: str

    @property
    def you(self) -> SnakeBody:
        for snake in self.snakes:
            if snake.id == self.you_id:
                return snake
        raise LookupError(f"snake {self.you_id!r} is not on the board")

    @property
    def opponents(self) -> typing.List[SnakeBody]:
        return [snake for snake in self.snakes if snake.id != self.you_id]

    @classmethod
    def from_game_state(cls, game_state: typing.Dict) -> "GameSnapshot":
        """
        Parse and validate a Battlesnake move request.

        Raises ValueError for anything the decision engine cannot take as
        given: a missing key, a board smaller than 1x1, an empty body, or a
        body segment or food item off the board.
        """
        if not isinstance(game_state, dict):
            raise ValueError("game state must be a JSON object")
        board = _require(game_state, "board", dict)
        you = _require(game_state, "you", dict)
        width = _int_field(board, "width")
        height = _int_field(board, "height")
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")

        game = game_state.get("game") or {}
        game_id = str(game.get("id", "")) if isinstance(game, dict) else ""
        turn = game_state.get("turn", 0)
        if isinstance(turn, bool) or not isinstance(turn, int):
            raise ValueError("turn must be an integer")

        raw_snakes = _require(board, "snakes", list)
        snakes = [_parse_snake(raw, width, height) for raw in raw_snakes]
        me = _parse_snake(you, width, height)
        if all(snake.id != me.id for snake in snakes):
            snakes.append(me)

        raw_food = _require(board, "food", list) if "food" in board else []
        food = tuple(
            _parse_coordinate(raw, width, height, "food").to_grid() for raw in raw_food
        )

        return cls(
            game_id=game_id,
            turn=turn,
            width=width,
            height=height,
            snakes=tuple(snakes),
            food=food,
            you_id=me.id,
        )


def _require(container: typing.Dict, key: str, kind: type):
    if key not in container:
        raise ValueError(f"missing required field '{key}'")
    value = container[key]
    if not isinstance(value, kind):
        raise ValueError(f"field '{key}' must be a {kind.__name__}")
    return value


def _int_field(container: typing.Dict, key: str) -> int:
    value = container.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    return value


def _parse_coordinate(raw, width: int, height: int, what: str) -> Coordinate:
    if not isinstance(raw, dict):
        raise ValueError(f"{what} coordinate must be an object with x and y")
    point = Coordinate(_int_field(raw, "x"), _int_field(raw, "y"))
    if not (0 <= point.x < width and 0 <= point.y < height):
        raise ValueError(f"{what} coordinate {tuple(point)} is off the {width}x{height} board")
    return point


def _parse_snake(raw, width: int, height: int) -> SnakeBody:
    if not isinstance(raw, dict):
        raise ValueError("snake must be a JSON object")
    if "id" not in raw:
        raise ValueError("missing required field 'id'")
    snake_id = str(raw["id"])
    body = _require(raw, "body", list)
    if not body:
        raise ValueError(f"snake {snake_id!r} has an empty body")
    segments = tuple(_parse_coordinate(part, width, height, "body").to_grid() for part in body)

    length = raw.get("length", len(segments))
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError(f"snake {snake_id!r} length must be a non-negative integer")
    health = raw.get("health", 100)
    if isinstance(health, bool) or not isinstance(health, int):
        raise ValueError(f"snake {snake_id!r} health must be an integer")

    return SnakeBody(
        id=snake_id,
        name=str(raw.get("name", snake_id)),
        body=segments,
        length=length,
        health=health,
    )
