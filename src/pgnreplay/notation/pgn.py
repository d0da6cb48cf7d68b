"""PGN tag-pair lookup and movetext tokenization."""

from __future__ import annotations

import re

from pgnreplay.notation.models import PgnGame

SEVEN_TAG_ROSTER: tuple[str, ...] = (
    "Event",
    "Site",
    "Date",
    "Round",
    "White",
    "Black",
    "Result",
)

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_TAG_ESCAPE_RE = re.compile(r"\\(.)")
_PGN_RESULT_TOKENS = {"1-0", "0-1", "1/2-1/2", "*"}
_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")
_MOVE_NUMBER_PREFIX_RE = re.compile(r"^\d+\.+")


def _parse_movetext_mainline(movetext: str) -> tuple[list[str], str | None]:
    """Parse movetext and return mainline SAN tokens plus the result marker."""
    moves: list[str] = []
    result: str | None = None
    variation_depth = 0
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch.isspace():
            idx += 1
            continue

        if ch == "{":
            end = movetext.find("}", idx + 1)
            idx = total if end < 0 else end + 1
            continue

        if ch == ";":
            end = movetext.find("\n", idx + 1)
            idx = total if end < 0 else end
            continue

        if ch == "(":
            variation_depth += 1
            idx += 1
            continue

        if ch == ")":
            variation_depth = max(0, variation_depth - 1)
            idx += 1
            continue

        token_end = idx
        while (
            token_end < total
            and not movetext[token_end].isspace()
            and movetext[token_end] not in "{}();"
        ):
            token_end += 1
        token = movetext[idx:token_end]
        idx = token_end

        if not token or variation_depth > 0:
            continue

        if token in _PGN_RESULT_TOKENS:
            result = token
            continue

        if _MOVE_NUMBER_RE.match(token):
            continue

        if token.startswith("$") and token[1:].isdigit():
            continue

        # "1.e4" and "1...e5" glue the move number to the move.
        token = _MOVE_NUMBER_PREFIX_RE.sub("", token).lstrip(".")
        if not token:
            continue

        moves.append(token)

    return moves, result


def _split_sections(pgn_text: str) -> tuple[list[str], list[str]]:
    """Split a game into its tag-pair lines and its movetext lines."""
    lines = [raw.strip() for raw in pgn_text.splitlines()]
    idx = 0
    while idx < len(lines) and not lines[idx]:
        idx += 1
    tag_lines: list[str] = []
    while idx < len(lines) and lines[idx].startswith("["):
        tag_lines.append(lines[idx])
        idx += 1
    movetext = [line for line in lines[idx:] if line and not line.startswith("%")]
    return tag_lines, movetext


def _parse_tag_pair(line: str) -> tuple[str, str]:
    match = _PGN_HEADER_RE.match(line)
    if match is None:
        raise ValueError(f"Invalid PGN header line: {line}")
    name, raw_value = match.groups()
    return name, _TAG_ESCAPE_RE.sub(r"\1", raw_value)


def parse_pgn_game(pgn_text: str) -> PgnGame:
    """Parse one PGN game into its tag pairs, mainline and result.

    The tag section is the run of ``[Name "Value"]`` lines at the top; the
    first blank or other line ends it. The result comes from the movetext
    termination marker, else from a valid ``Result`` tag, else ``None``.
    """
    tag_lines, movetext = _split_sections(pgn_text)
    headers = dict(_parse_tag_pair(line) for line in tag_lines)
    moves, result = _parse_movetext_mainline("\n".join(movetext))
    if result is None and headers.get("Result") in _PGN_RESULT_TOKENS:
        result = headers["Result"]
    return PgnGame(headers=headers, moves=moves, result=result)


def tag_value(tag_name: str, pgn_text: str) -> str | None:
    """Value of the *tag_name* tag pair, or ``None`` when it is absent."""
    return parse_pgn_game(pgn_text).tag(tag_name)


def list_moves(pgn_text: str) -> list[str]:
    """Mainline SAN tokens of a PGN game, in play order."""
    return parse_pgn_game(pgn_text).moves
