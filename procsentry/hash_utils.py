"""File hashing helpers."""

from __future__ import annotations

import hashlib
import os
from typing import Union

_CHUNK_SIZE = 1024 * 1024


def get_sha256(file_path: Union[str, os.PathLike]) -> str:
    """Return the lower-case hex SHA-256 of a file's contents.

    A file that cannot be opened is hashed as if it were empty.
    """
    digest = hashlib.sha256()
    try:
        handle = open(file_path, "rb")
    except OSError:
        return digest.hexdigest()
    with handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()