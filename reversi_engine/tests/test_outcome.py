from reversi_engine.game.board import Board, BLACK, WHITE, initial_board
from reversi_engine.game.outcome import Score, score, describe

def _full_board(b_count: int, w_count: int) -> Board:
    total = 64
    assert b_count + w_count == total
    rows = []
    left = b_count
    for _ in range(8):
        row = []
        for _ in range(8):
            if left > 0:
                row.append("B"); left -= 1
            else:
                row.append("W")
        rows.append(row)
    return Board.from_rows(rows)

def test_score_counts_stones():
    assert score(initial_board()) == Score(2, 2)
    assert score(_full_board(40, 24)).as_dict() == {"black": 40, "white": 24}

def test_winner_and_draw():
    assert score(_full_board(34, 30)).winner == BLACK
    assert score(_full_board(20, 44)).winner == WHITE
    assert score(_full_board(32, 32)).winner is None

def test_describe():
    assert describe(Score(40, 24)) == "BLACK wins 40–24"
    assert describe(Score(10, 54)) == "WHITE wins 54–10"
    assert describe(Score(32, 32)) == "DRAW 32–32"
