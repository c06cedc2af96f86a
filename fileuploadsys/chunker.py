"""Splitting a byte stream into fixed-size chunk files."""

from __future__ import annotations

import os
from typing import BinaryIO, List

from fileuploadsys.datastore import save_chunk_to_file

CHUNK_PREFIX = "outputChunk"


def split_file(file: BinaryIO, chunksize: int, repo_path: str) -> List[str]:
    """Read ``file`` in pieces of ``chunksize`` bytes and store each one.

    Chunks are written to ``<repo_path>/outputChunk_<index>``, with the
    index starting at 0. Returns the paths written, in order.
    """
    if chunksize <= 0:
        raise ValueError(f"chunk size must be positive, got {chunksize}")

    written: List[str] = []
    for index, chunk in enumerate(iter(lambda: file.read(chunksize), b"")):
        name = f"{os.fspath(repo_path)}/{CHUNK_PREFIX}_{index}"
        save_chunk_to_file(chunk, name)
        written.append(name)
    return written