"""Lenient CSV decoder for the prompt collection.

Handles double-quoted fields containing commas, line breaks and doubled-quote
escapes. Rows whose field count differs from the header are dropped, never
raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ","


def _scan(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(char, quoted)`` pairs with escape pairs already collapsed.

    A quote opens a quoted section only at the start of a field. Inside a
    quoted section a doubled quote yields one literal quote and any other
    quote closes the section. Stray quotes in unquoted fields are literal.
    """
    quoted = False
    field_start = True
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == QUOTE:
            if quoted:
                if i + 1 < length and text[i + 1] == QUOTE:
                    yield QUOTE, True
                    i += 2
                    field_start = False
                    continue
                quoted = False
                i += 1
                continue
            if field_start:
                quoted = True
                field_start = False
                i += 1
                continue
        yield char, quoted
        field_start = not quoted and char in (DELIMITER, "\n", "\r")
        i += 1


def _rows(text: str) -> Iterator[list[str]]:
    """Split text into rows of fields, honouring quoted line breaks and commas."""
    fields: list[str] = []
    buffer: list[str] = []
    pending_cr = False
    for char, quoted in _scan(text):
        if pending_cr:
            pending_cr = False
            if char == "\n" and not quoted:
                continue
        if not quoted and char in ("\n", "\r"):
            fields.append("".join(buffer))
            yield fields
            fields, buffer = [], []
            pending_cr = char == "\r"
            continue
        if not quoted and char == DELIMITER:
            fields.append("".join(buffer))
            buffer = []
            continue
        buffer.append(char)
    if buffer or fields:
        fields.append("".join(buffer))
        yield fields


def _is_blank(fields: list[str]) -> bool:
    return len(fields) == 1 and not fields[0].strip()


def decode(text: str) -> list[dict[str, str]]:
    """Decode CSV text into one ``{header: value}`` dict per accepted data row.

    The first non-blank row is the header. Blank rows are skipped and rows
    whose arity differs from the header are dropped. Empty input yields an
    empty list.
    """
    header: list[str] | None = None
    records: list[dict[str, str]] = []
    dropped = 0
    for number, fields in enumerate(_rows(text.lstrip("\ufeff")), start=1):
        if _is_blank(fields):
            continue
        if header is None:
            header = [name.strip() for name in fields]
            continue
        if len(fields) != len(header):
            dropped += 1
            logger.debug(
                "CSV row dropped — row=%d fields=%d expected=%d",
                number,
                len(fields),
                len(header),
            )
            continue
        records.append(dict(zip(header, fields, strict=True)))

    if dropped:
        logger.info("CSV decoded with dropped rows — records=%d dropped=%d", len(records), dropped)
    return records
