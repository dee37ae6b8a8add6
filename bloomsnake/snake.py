import logging
import typing

from bloomsnake import __version__
from bloomsnake.behavior import SnakeBehavior
from bloomsnake.config import Weights
from bloomsnake.grid import InfluenceGrid, initialize_terrain
from bloomsnake.render import render_board, render_grid
from bloomsnake.snapshot import GameSnapshot

logger = logging.getLogger(__name__)

PERSONALITY = {
    "author": "",
    "color": "#ACACE6",
    "head": "beluga",
    "tail": "default",
}


class Decision(typing.NamedTuple):
    move: str
    grid: InfluenceGrid
    scores: typing.Dict[str, int]
    hungry: bool
    steer: str


def decide(snapshot: GameSnapshot, weights: typing.Optional[Weights] = None) -> Decision:
    """
    Score the board for this turn and pick a direction.

    The grid is rebuilt from scratch every call; nothing carries over
    between turns.
    """
    weights = weights or Weights()
    grid = initialize_terrain(snapshot.width, snapshot.height, weights)

    SnakeBehavior.apply_snake_hazards(snapshot, grid, weights)
    hungry = SnakeBehavior.apply_food_incentive(snapshot, grid, weights)
    steer = SnakeBehavior.apply_center_bias(snapshot, grid, weights)

    next_move = SnakeBehavior.select_move(snapshot, grid)
    return Decision(
        move=next_move,
        grid=grid,
        scores=SnakeBehavior.neighbor_scores(snapshot, grid),
        hungry=hungry,
        steer=steer,
    )


class Snake:
    """Battlesnake API handlers that decide each move from a fresh influence grid."""

    def __init__(self, weights: typing.Optional[Weights] = None, debug_dump: bool = False,
                 personality: typing.Optional[typing.Dict] = None):
        self.weights = weights or Weights()
        self.debug_dump = debug_dump
        self.personality = dict(PERSONALITY, **(personality or {}))

    def info(self) -> typing.Dict:
        """
        Returns information about the Battlesnake.
        """
        logger.info("INFO")
        return {
            "apiversion": "1",
            "author": self.personality["author"],
            "color": self.personality["color"],
            "head": self.personality["head"],
            "tail": self.personality["tail"],
            "version": __version__,
        }

    def start(self, game_state: typing.Dict):
        """
        called when the snake enters a game; nothing is cached for later turns
        """
        logger.info("%s START", _game_id(game_state))

    def end(self, game_state: typing.Dict):
        """
        called at the end of the game
        """
        logger.info("%s END\n", _game_id(game_state))

    def move(self, game_state: typing.Dict) -> typing.Dict:
        """
        Decides the next move for the snake
        """
        snapshot = GameSnapshot.from_game_state(game_state)
        decision = decide(snapshot, self.weights)

        if self.debug_dump:
            logger.info("board\n%s", render_board(snapshot))
            logger.info("influence\n%s", render_grid(decision.grid))
        logger.debug(
            "%s scores %s hungry=%s steer=%s",
            snapshot.game_id, decision.scores, decision.hungry, decision.steer,
        )

        logger.info("%s MOVE %d: %s", snapshot.game_id, snapshot.turn, decision.move)
        return {"move": decision.move}

    def handlers(self) -> typing.Dict[str, typing.Callable]:
        return {
            "info": self.info,
            "start": self.start,
            "move": self.move,
            "end": self.end,
        }


def _game_id(game_state: typing.Dict) -> str:
    game = game_state.get("game") if isinstance(game_state, dict) else None
    if isinstance(game, dict):
        return str(game.get("id", ""))
    return ""
