"""EVE JSON line decoder.

Splits raw log text into lines and decodes each one independently. A bad
line never aborts the batch: it is reported through logging and dropped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from .models import DecodedLine, LineStatus, Record, is_record

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def _reject_constant(name: str) -> float:
    # NaN / Infinity are not valid JSON.
    raise ValueError(f"invalid JSON constant {name}")


def _trim(line: str) -> str:
    # str.strip() leaves U+FEFF (byte order mark) in place.
    s = line.strip()
    while s.startswith(_BOM) or s.endswith(_BOM):
        s = s.strip(_BOM).strip()
    return s


def iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_no, stripped_line) for every non-blank line."""
    for line_no, line in enumerate(text.split("\n"), start=1):
        s = _trim(line)
        if s:
            yield line_no, s


def decode_line(line_no: int, line: str) -> DecodedLine:
    """Decode a single stripped line into a DecodedLine result."""
    try:
        obj = json.loads(line, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError subclass; deep nesting recurses out.
        return DecodedLine(line_no=line_no, raw=line, status=LineStatus.MALFORMED, error=str(e))

    if not is_record(obj):
        return DecodedLine(
            line_no=line_no,
            raw=line,
            status=LineStatus.NOT_OBJECT,
            error="not a JSON object",
        )
    return DecodedLine(line_no=line_no, raw=line, status=LineStatus.OK, record=obj)


def iter_decoded(text: str) -> Iterator[DecodedLine]:
    """Yield one DecodedLine per non-blank line, in input order."""
    for line_no, line in iter_lines(text):
        yield decode_line(line_no, line)


def decode_records(text: str) -> list[Record]:
    """Return the successfully decoded records, preserving line order."""
    out: list[Record] = []
    for d in iter_decoded(text):
        if d.status is LineStatus.OK:
            out.append(d.record)
        elif d.status is LineStatus.NOT_OBJECT:
            logger.debug("Skipping non-object line %d: %s", d.line_no, d.raw)
        else:
            logger.warning("Skipping malformed line: %s", d.raw)
    return out
