"""
Tests for parsing Battlesnake move requests into snapshots.
"""

import pytest

from bloomsnake.snapshot import Coordinate, GameSnapshot, GridCoordinate

from helpers import make_snake, make_state


class TestCoordinates:
    def test_board_to_grid_adds_padding(self):
        assert Coordinate(0, 0).to_grid() == GridCoordinate(1, 1)
        assert Coordinate(10, 3).to_grid() == GridCoordinate(11, 4)

    def test_grid_to_board(self):
        assert GridCoordinate(6, 2).to_board() == Coordinate(5, 1)


class TestFromGameState:
    def test_basic_fields(self, weaker_enemy_state):
        snapshot = GameSnapshot.from_game_state(weaker_enemy_state)
        assert snapshot.game_id == "game-1"
        assert snapshot.turn == 0
        assert (snapshot.width, snapshot.height) == (11, 11)
        assert [snake.id for snake in snapshot.snakes] == ["me", "enemy"]
        assert snapshot.you.id == "me"
        assert [snake.id for snake in snapshot.opponents] == ["enemy"]

    def test_bodies_are_grid_coordinates(self, lone_snake_state):
        snapshot = GameSnapshot.from_game_state(lone_snake_state)
        assert snapshot.you.body == (
            GridCoordinate(6, 6),
            GridCoordinate(6, 5),
            GridCoordinate(6, 4),
        )
        assert snapshot.you.head == GridCoordinate(6, 6)

    def test_food_is_grid_coordinates(self, hungry_state):
        snapshot = GameSnapshot.from_game_state(hungry_state)
        assert snapshot.food == (GridCoordinate(2, 6),)
        assert snapshot.you.health == 10

    def test_length_field_is_authoritative(self):
        # stacked segments: three body entries on two cells, length 4
        you = make_snake("me", [(2, 2), (2, 1), (2, 1)], length=4)
        snapshot = GameSnapshot.from_game_state(make_state(you))
        assert snapshot.you.length == 4
        assert len(snapshot.you.body) == 3

    def test_optional_fields_default(self):
        you = {"id": "me", "body": [{"x": 1, "y": 1}]}
        state = {"board": {"width": 3, "height": 3, "snakes": [you]}, "you": you}
        snapshot = GameSnapshot.from_game_state(state)
        assert snapshot.turn == 0
        assert snapshot.game_id == ""
        assert snapshot.food == ()
        assert snapshot.you.length == 1
        assert snapshot.you.health == 100
        assert snapshot.you.name == "me"

    def test_you_appended_when_not_listed(self):
        you = make_snake("me", [(1, 1)])
        other = make_snake("other", [(3, 3)])
        state = make_state(you, others=[other])
        state["board"]["snakes"] = [other]
        snapshot = GameSnapshot.from_game_state(state)
        assert [snake.id for snake in snapshot.snakes] == ["other", "me"]

    def test_you_not_duplicated(self, lone_snake_state):
        snapshot = GameSnapshot.from_game_state(lone_snake_state)
        assert len(snapshot.snakes) == 1

    def test_snapshot_is_frozen(self, lone_snake_state):
        snapshot = GameSnapshot.from_game_state(lone_snake_state)
        with pytest.raises(AttributeError):
            snapshot.turn = 5


class TestRejectsMalformedInput:
    @pytest.mark.parametrize(
        "mutate,message",
        [
            (lambda s: s.pop("board"), "missing required field 'board'"),
            (lambda s: s.pop("you"), "missing required field 'you'"),
            (lambda s: s["board"].update(width=0), "at least 1x1"),
            (lambda s: s["board"].update(height="11"), "'height' must be an integer"),
            (lambda s: s["board"].update(snakes={}), "'snakes' must be a list"),
            (lambda s: s["board"].update(food=[{"x": 11, "y": 0}]), "off the 11x11 board"),
            (lambda s: s["board"].update(food=None), "'food' must be a list"),
            (lambda s: s["board"].update(food={"x": 1, "y": 1}), "'food' must be a list"),
            (lambda s: s.update(turn="3"), "turn must be an integer"),
        ],
    )
    def test_board_errors(self, lone_snake_state, mutate, message):
        mutate(lone_snake_state)
        with pytest.raises(ValueError, match=message):
            GameSnapshot.from_game_state(lone_snake_state)

    def test_not_an_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            GameSnapshot.from_game_state(None)

    def test_empty_body(self):
        you = make_snake("me", [(1, 1)])
        you["body"] = []
        with pytest.raises(ValueError, match="empty body"):
            GameSnapshot.from_game_state(make_state(you))

    def test_body_off_board(self):
        you = make_snake("me", [(0, 0), (-1, 0)])
        with pytest.raises(ValueError, match="off the"):
            GameSnapshot.from_game_state(make_state(you))

    def test_negative_length(self):
        you = make_snake("me", [(1, 1)], length=-2)
        with pytest.raises(ValueError, match="non-negative"):
            GameSnapshot.from_game_state(make_state(you))

    def test_missing_id(self):
        you = make_snake("me", [(1, 1)])
        del you["id"]
        with pytest.raises(ValueError, match="'id'"):
            GameSnapshot.from_game_state(make_state(you))

    def test_coordinate_must_be_integers(self):
        you = make_snake("me", [(1, 1)])
        you["body"][0]["x"] = 1.5
        with pytest.raises(ValueError, match="'x' must be an integer"):
            GameSnapshot.from_game_state(make_state(you))
