#!/usr/bin/env python3
"""
CSV Codec

Converts a record collection to and from delimited text.

Format:
- Header line: the first record's keys in that record's own order, joined by
  commas. A key is only quoted if it contains a comma or a double quote,
  or starts with whitespace.
- Data lines: every field wrapped in double quotes, inner quotes doubled,
  aligned to the header keys.
- Lines are separated by a single newline. The format is line-oriented:
  values containing line breaks are not supported and will not survive a
  round trip.
"""

import csv
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.models import BaseRecord

logger = logging.getLogger(__name__)


def _field_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote_field(value: Any) -> str:
    """Wrap a value in double quotes, doubling any inner quotes."""
    return '"' + _field_text(value).replace('"', '""') + '"'


def _header_field(key: str) -> str:
    if "," in key or '"' in key or key != key.lstrip():
        return quote_field(key)
    return key


def _as_mapping(record: BaseRecord | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(record, BaseRecord):
        return record.to_dict()
    return record


def encode(records: Iterable[BaseRecord | Mapping[str, Any]]) -> str:
    """
    Encode records as CSV text.

    Args:
        records: Records or plain mappings; the first one fixes the columns

    Returns:
        CSV text, or '' when there are no records (nothing to export)
    """
    rows = [_as_mapping(record) for record in records]
    if not rows:
        return ""

    headers = list(rows[0].keys())
    lines = [",".join(_header_field(key) for key in headers)]
    for row in rows:
        lines.append(",".join(quote_field(row.get(key, "")) for key in headers))
    return "\n".join(lines)


def split_line(line: str) -> list[str]:
    """
    Split one CSV line into unquoted field values.

    Quoted fields have their wrapping quotes removed and doubled quotes
    collapsed; unquoted fields are taken as-is.
    """
    try:
        return next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error as e:
        logger.debug("Falling back to plain split for line %r: %s", line, e)
        return [_unwrap(part) for part in line.split(",")]


def _unwrap(text: str) -> str:
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return text.replace('""', '"')


def decode(text: str) -> list[dict[str, str]]:
    """
    Decode CSV text into one string mapping per data line.

    Fields are matched to headers by position; missing trailing fields become
    '' and surplus fields are dropped. Blank lines are ignored.

    Returns:
        List of records, empty when there is no header plus at least one data line
    """
    # Split on \n only: form feeds, \x85 and \u2028 may sit inside a field
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        return []

    headers = split_line(lines[0])
    records = []
    for line in lines[1:]:
        values = split_line(line)
        records.append({header: (values[index] if index < len(values) else "") for index, header in enumerate(headers)})
    return records
