"""Tests for word scoring."""

from wordtiles.game.board import Board
from wordtiles.game.layout import Bonus, MappingLayout
from wordtiles.game.scoring import BINGO_BONUS, score_word
from wordtiles.game.tiles import Tile


def _tiles(letters: str) -> list[Tile]:
    return [Tile.blank() if ch == "?" else Tile.of(ch) for ch in letters]


def _single_premium(bonus: Bonus) -> Board:
    return Board(MappingLayout({(7, 7): bonus}, name="single"))


class TestPremiums:
    def test_center_double_word(self):
        assert score_word(Board(), "CAT", 7, 7, True) == 10

    def test_lowercase_word(self):
        assert score_word(Board(), "cat", 7, 7, True) == 10

    def test_triple_letter(self):
        # D=2 tripled, O=1, G=2
        assert score_word(_single_premium(Bonus.TL), "DOG", 7, 7, True) == 9

    def test_double_word(self):
        assert score_word(_single_premium(Bonus.DW), "DOG", 7, 7, True) == 10

    def test_triple_word(self):
        assert score_word(_single_premium(Bonus.TW), "DOG", 7, 7, True) == 15

    def test_no_premiums(self):
        board = Board(MappingLayout({}, name="plain"))
        assert score_word(board, "DOG", 7, 7, True) == 5


class TestBlanks:
    def test_blank_in_rack_scores_zero(self):
        assert score_word(Board(), "CAT", 7, 7, True, blank_positions={2}) == 8

    def test_two_blanks(self):
        assert score_word(Board(), "CAT", 7, 7, True, blank_positions={1, 2}) == 6

    def test_blank_on_board_scores_zero(self):
        board = Board()
        board.place("CAT", 7, 7, True, _tiles("C?T"), first_move=True)
        # C=3, plus O and T on plain squares
        assert score_word(board, "COT", 7, 7, False) == 5
        # Blank A=0, T on the double letter at (8,8)
        assert score_word(board, "AT", 7, 8, False) == 2


class TestUsedPremiums:
    def test_premium_counted_once(self):
        board = Board()
        board.place("CAT", 7, 7, True, _tiles("CAT"), first_move=True)
        # Center double word is already covered by the C
        assert score_word(board, "COT", 7, 7, False) == 5


class TestBingo:
    def test_full_rack_earns_bonus(self):
        # T lands on the double letter at (7,11): (1+1+1+1+2+1+1) * 2 + 50
        assert score_word(Board(), "SENATOR", 7, 7, True) == 66

    def test_bonus_added_after_multiplier(self):
        board = Board(MappingLayout({(7, 7): Bonus.DW}, name="single"))
        assert score_word(board, "SENATOR", 7, 7, True) == 7 * 2 + BINGO_BONUS

    def test_reused_letter_is_not_a_bingo(self):
        board = Board()
        board.place("AT", 7, 7, True, _tiles("AT"), first_move=True)
        # Seven letters, but A and T already sit on the board
        score = score_word(board, "SENATOR", 7, 4, True)
        assert score < BINGO_BONUS
