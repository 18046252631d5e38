"""Format sanitizer run before mask compilation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from inputmask.utils.errors import FormatError

_ESCAPE = "\\"
_ELLIPSIS = "…"
_VALUE_OPEN = "["
_FIXED_OPEN = "{"
_CLOSING = {"[": "]", "{": "}"}
_CLOSE_BRACKETS = frozenset(_CLOSING.values())

_SYMBOL_FAMILIES = {
    "0": "numeric",
    "9": "numeric",
    "A": "letter",
    "a": "letter",
    "_": "alphanumeric",
    "-": "alphanumeric",
}
_OPTIONAL_SYMBOLS = frozenset({"9", "a", "-"})

BlockKind = Literal["free", "value", "fixed"]


@dataclass(frozen=True)
class _Block:
    kind: BlockKind
    text: str
    start: int


def sanitize(pattern: str) -> str:
    """Validate bracket structure and normalize value groups.

    Rules:
    - Groups are flat: ``[`` or ``{`` inside an open group is an error.
    - Every group must be closed by its own bracket type.
    - A backslash escapes the next character, which is then never a bracket.
    - Value groups mixing symbol families are split: ``[00AA]`` -> ``[00][AA]``.
    - Inside a value group mandatory symbols precede optional ones and the
      ellipsis comes last: ``[9900]`` -> ``[0099]``.

    Raises:
        FormatError: when the pattern breaks any of the rules above.
    """

    return "".join(_sanitize_block(block, pattern) for block in _split_blocks(pattern))


def _split_blocks(pattern: str) -> list[_Block]:
    blocks: list[_Block] = []
    chunk: list[str] = []
    chunk_start = 0
    open_bracket: str | None = None
    escaped = False

    for index, char in enumerate(pattern):
        if escaped:
            chunk.append(char)
            escaped = False
            continue

        if char == _ESCAPE:
            chunk.append(char)
            escaped = True
            continue

        if char in _CLOSING:
            if open_bracket is not None:
                raise FormatError(
                    f"Nested bracket '{char}' at position {index}",
                    pattern=pattern,
                    position=index,
                )
            if chunk:
                blocks.append(_Block(kind="free", text="".join(chunk), start=chunk_start))
            chunk = [char]
            chunk_start = index
            open_bracket = char
            continue

        if char in _CLOSE_BRACKETS:
            if open_bracket is None or _CLOSING[open_bracket] != char:
                raise FormatError(
                    f"Unexpected closing bracket '{char}' at position {index}",
                    pattern=pattern,
                    position=index,
                )
            chunk.append(char)
            kind: BlockKind = "value" if open_bracket == _VALUE_OPEN else "fixed"
            blocks.append(_Block(kind=kind, text="".join(chunk), start=chunk_start))
            chunk = []
            chunk_start = index + 1
            open_bracket = None
            continue

        chunk.append(char)

    if open_bracket is not None:
        raise FormatError(
            f"Unclosed bracket '{open_bracket}' at position {chunk_start}",
            pattern=pattern,
            position=chunk_start,
        )

    if chunk:
        blocks.append(_Block(kind="free", text="".join(chunk), start=chunk_start))

    return blocks


def _sanitize_block(block: _Block, pattern: str) -> str:
    if block.kind != "value":
        return block.text

    groups: list[list[str]] = []
    family: str | None = None
    for offset, symbol in enumerate(block.text[1:-1]):
        if symbol == _ELLIPSIS:
            if not groups:
                groups.append([])
            groups[-1].append(symbol)
            continue

        symbol_family = _SYMBOL_FAMILIES.get(symbol)
        if symbol_family is None:
            position = block.start + 1 + offset
            raise FormatError(
                f"Unsupported symbol '{symbol}' in value group at position {position}",
                pattern=pattern,
                position=position,
            )
        if symbol_family != family:
            groups.append([])
            family = symbol_family
        groups[-1].append(symbol)

    return "".join("[" + "".join(sorted(group, key=_symbol_rank)) + "]" for group in groups)


def _symbol_rank(symbol: str) -> int:
    if symbol == _ELLIPSIS:
        return 2
    if symbol in _OPTIONAL_SYMBOLS:
        return 1
    return 0
