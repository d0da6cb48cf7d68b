"""Tests for PGN tag lookup and movetext tokenization."""

import pytest

from pgnreplay.notation.pgn import (
    SEVEN_TAG_ROSTER,
    list_moves,
    parse_pgn_game,
    tag_value,
)


class TestTags:
    def test_roster_values(self, sample_pgn: str) -> None:
        assert tag_value("Event", sample_pgn) == "F/S Return Match"
        assert tag_value("White", sample_pgn) == "Fischer, Robert J."
        assert tag_value("Result", sample_pgn) == "1/2-1/2"

    def test_absent_tag_is_none(self, sample_pgn: str) -> None:
        assert tag_value("ECO", sample_pgn) is None

    def test_all_roster_tags_present(self, sample_pgn: str) -> None:
        game = parse_pgn_game(sample_pgn)
        assert all(game.tag(name) is not None for name in SEVEN_TAG_ROSTER)

    def test_escaped_quotes(self) -> None:
        pgn = '[Event "The \\"Immortal\\" Game"]\n\n1. e4 *\n'
        assert tag_value("Event", pgn) == 'The "Immortal" Game'

    def test_malformed_header(self) -> None:
        with pytest.raises(ValueError, match="Invalid PGN header"):
            parse_pgn_game('[Event "unterminated]\n\n1. e4 *\n')


class TestMovetext:
    def test_sample_moves(self, sample_pgn: str) -> None:
        moves = list_moves(sample_pgn)
        assert moves[:4] == ["e4", "e5", "Nf3", "Nc6"]
        assert moves[-1] == "Re6"
        assert len(moves) == 85

    def test_comments_variations_and_nags_skipped(self) -> None:
        pgn = (
            "1. e4 {best by test} e5 (1... c5 2. Nf3 (2. c3)) 2. Nf3 $1 ; home\n"
            "Nc6 3. Bb5 a6 *\n"
        )
        assert list_moves(pgn) == ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6"]

    def test_glued_move_numbers(self) -> None:
        assert list_moves("1.e4 e5 2.Nf3 2...Nc6 *") == ["e4", "e5", "Nf3", "Nc6"]

    def test_black_continuation(self) -> None:
        assert list_moves("12... Qxd5 13. O-O-O *") == ["Qxd5", "O-O-O"]

    def test_escape_lines_skipped(self) -> None:
        assert list_moves("% engine output\n1. d4 d5 *") == ["d4", "d5"]

    def test_result_from_movetext(self) -> None:
        assert parse_pgn_game("1. e4 e5 1-0").result == "1-0"

    def test_result_falls_back_to_header(self) -> None:
        game = parse_pgn_game('[Result "0-1"]\n\n1. e4 e5\n')
        assert game.result == "0-1"

    def test_no_moves(self) -> None:
        game = parse_pgn_game('[Event "Empty"]\n\n*\n')
        assert game.moves == []
        assert game.result == "*"

    def test_movetext_result_wins_over_header(self) -> None:
        game = parse_pgn_game('[Result "1-0"]\n\n1. e4 e5 *\n')
        assert game.result == "*"

    def test_no_result_anywhere(self) -> None:
        assert parse_pgn_game("1. e4 e5\n").result is None

    def test_escaped_backslash_before_quote(self) -> None:
        pgn = '[Annotator "C:\\\\"]\n\n1. e4 *\n'
        assert tag_value("Annotator", pgn) == "C:\\"

    def test_blank_lines_before_tags(self) -> None:
        game = parse_pgn_game('\n\n[Event "Casual"]\n\n1. d4 *\n')
        assert game.tag("Event") == "Casual"
        assert game.moves == ["d4"]
