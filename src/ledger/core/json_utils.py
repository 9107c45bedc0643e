#!/usr/bin/env python3
"""
JSON Utilities Module

Consistent JSON formatting and atomic file writes. Files are
written atomically: the document goes to a sibling temp file which then
replaces the target, so readers never observe a half-written slot.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string
    """
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def write_text_atomic(filepath: str | Path, text: str) -> None:
    """
    Replace a file's contents in a single rename.

    Args:
        filepath: Target path; parent directories are created
        text: Full file contents
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

