from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Mapping, Optional, Sequence, Union

from .errors import CSVParseError
from .logger import get_logger

logger = get_logger(__name__)

# Accepted header aliases, checked case-sensitively in priority order.
AREA_ALIASES = ("square_footage", "area", "sqft", "SQUARE_FOOTAGE")
FOOTFALL_ALIASES = ("mall_footfall", "footfall", "mallTraffic", "MALL_FOOTFALL")

SAMPLE_CSV = "store_id,square_footage,mall_footfall\nS001,1200,15000\nS002,800,5000\nS003,2500,42000\n"

_LINE_BREAK = re.compile(r"\r?\n")

Record = Dict[str, Any]


@dataclass
class ParsedCSV:
    headers: List[str] = field(default_factory=list)
    rows: List[Record] = field(default_factory=list)


def parse_csv(text: str) -> ParsedCSV:
    """
    Very small CSV parser for simple files with a header row.

    - lines split on LF or CRLF, empty lines dropped
    - fields split on literal commas and stripped
    - short rows are padded with "", extra fields are dropped

    Quoted fields are NOT supported: a comma inside quotes still splits.
    """
    lines = [line for line in _LINE_BREAK.split(text or "") if line]
    if not lines:
        return ParsedCSV()

    headers = [h.strip() for h in lines[0].split(",")]
    rows: List[Record] = []
    for line in lines[1:]:
        parts = line.split(",")
        rows.append({h: (parts[i].strip() if i < len(parts) else "") for i, h in enumerate(headers)})

    return ParsedCSV(headers=headers, rows=rows)


def read_batch_upload(file: Union[str, bytes, IO[Any]]) -> ParsedCSV:
    """
    Reads an uploaded batch CSV (Streamlit UploadedFile, file object, bytes or str).
    Bytes are decoded as UTF-8 (a leading BOM is dropped).
    """
    raw: Any = file.read() if hasattr(file, "read") else file
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("Upload is not valid UTF-8: %s", e)
            raise CSVParseError() from e
    if not isinstance(raw, str):
        raise CSVParseError()

    parsed = parse_csv(raw)
    logger.info("Parsed batch CSV: %d headers, %d rows", len(parsed.headers), len(parsed.rows))
    return parsed


def resolve_field(row: Mapping[str, Any], aliases: Sequence[str]) -> Optional[Any]:
    """First alias present in the row wins, even when its value is empty."""
    for name in aliases:
        if name in row and row[name] is not None:
            return row[name]
    return None


__all__ = [
    "AREA_ALIASES",
    "FOOTFALL_ALIASES",
    "SAMPLE_CSV",
    "ParsedCSV",
    "Record",
    "parse_csv",
    "read_batch_upload",
    "resolve_field",
]
