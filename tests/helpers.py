"""Builders for Battlesnake move requests used across the tests."""

from bloomsnake.snapshot import GameSnapshot


def make_snake(snake_id, body, length=None, health=100, name=None):
    """Build a snake entry in Battlesnake JSON form from (x, y) tuples."""
    segments = [{"x": x, "y": y} for x, y in body]
    return {
        "id": snake_id,
        "name": name or snake_id,
        "health": health,
        "body": segments,
        "head": dict(segments[0]),
        "length": len(segments) if length is None else length,
    }


def make_state(you, others=(), food=(), width=11, height=11, turn=0, game_id="game-1"):
    """Build a move request with `you` listed first on the board."""
    return {
        "game": {"id": game_id, "timeout": 500},
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": [{"x": x, "y": y} for x, y in food],
            "hazards": [],
            "snakes": [you, *others],
        },
        "you": you,
    }


def make_snapshot(*args, **kwargs):
    return GameSnapshot.from_game_state(make_state(*args, **kwargs))
