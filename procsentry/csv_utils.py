"""Reading the comma separated watch-list configuration."""

from __future__ import annotations

import os
from typing import Dict, List, Union

ConfigurationMap = Dict[str, List[str]]


def _split_fields(line: str) -> List[str]:
    fields = line.split(",")
    # A trailing separator does not start a new field.
    if fields and fields[-1] == "":
        fields.pop()
    return fields


def read_csv(
    file_path: Union[str, os.PathLike], key_column_idx: int = 0
) -> ConfigurationMap:
    """Map the value of the key column of each row to the row's other columns.

    Rows whose key column is missing or empty are left out; later rows with
    the same key replace earlier ones. A file that cannot be opened yields
    an empty mapping.
    """
    result: ConfigurationMap = {}
    try:
        handle = open(file_path, encoding="utf-8", newline=None)
    except OSError:
        return result
    with handle:
        for raw_line in handle:
            fields = _split_fields(raw_line.rstrip("\n"))
            if key_column_idx >= len(fields) or key_column_idx < 0:
                continue
            key = fields[key_column_idx]
            if not key:
                continue
            result[key] = [
                value for idx, value in enumerate(fields) if idx != key_column_idx
            ]
    return result