"""Text dumps of the board and the influence grid for debugging."""

from bloomsnake.grid import InfluenceGrid
from bloomsnake.snapshot import GameSnapshot


def render_grid(grid: InfluenceGrid) -> str:
    """Render every padded cell, highest row first, right-aligned."""
    cell_width = max(len(str(value)) for _, value in grid)
    rows = []
    for row in reversed(grid.cells):
        rows.append(" ".join(str(value).rjust(cell_width) for value in row))
    return "\n".join(rows)


def render_board(snapshot: GameSnapshot) -> str:
    """
    Render the unpadded board.

    H/S mark our head and body, h/s enemy heads and bodies, * food and
    . empty cells. The top line is the highest y.
    """
    board = [["."] * snapshot.width for _ in range(snapshot.height)]
    for gx, gy in snapshot.food:
        board[gy - 1][gx - 1] = "*"
    for snake in snapshot.snakes:
        is_me = snake.id == snapshot.you_id
        # paint tail first so the head wins on stacked segments
        for i in range(len(snake.body) - 1, -1, -1):
            gx, gy = snake.body[i]
            mark = "H" if i == 0 else "S"
            board[gy - 1][gx - 1] = mark if is_me else mark.lower()
    return "\n".join("".join(row) for row in reversed(board))
