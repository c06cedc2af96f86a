"""Persistence of chunk data on disk."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def save_chunk_to_file(chunk: bytes, name: PathLike) -> None:
    """Write ``chunk`` to the file ``name``, creating or truncating it.

    Raises ``OSError`` (for example ``FileNotFoundError``) when the file
    cannot be created or written.
    """
    with open(name, "wb") as handle:
        handle.write(chunk)
        handle.flush()