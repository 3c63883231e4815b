"""File-level helpers for hashing and atomic replacement."""

from __future__ import annotations

import hashlib
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import IO, Any

from rehydrate.constants.hydration import (
    COPY_CHUNK_SIZE,
    COPY_TEMP_PREFIX,
    COPY_TEMP_SUFFIX,
    FILE_HASH_CHUNK_SIZE,
)


def file_sha256(path: Path) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


@contextmanager
def atomic_replace(
    target: Path,
    *,
    temp_prefix: str,
    temp_suffix: str,
    binary: bool = False,
    mode_source: Path | None = None,
) -> Iterator[IO[Any]]:
    """Yield a handle on a sibling temp file that replaces *target* on success.

    Any exception raised inside the block removes the temp file and leaves
    *target* as it was. When *mode_source* is given its permission bits are
    applied before the rename.
    """
    target.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb" if binary else "w",
            encoding=None if binary else "utf-8",
            dir=target.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        if mode_source is not None:
            shutil.copymode(mode_source, temp_name)
        os.replace(temp_name, target)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise


def copy_file_atomic(source: Path, target: Path) -> int:
    """Copy *source* bytes over *target* and return the number of bytes written."""
    with (
        atomic_replace(
            target,
            temp_prefix=COPY_TEMP_PREFIX,
            temp_suffix=COPY_TEMP_SUFFIX,
            binary=True,
            mode_source=source,
        ) as writer,
        source.open("rb") as reader,
    ):
        shutil.copyfileobj(reader, writer, COPY_CHUNK_SIZE)
        written = writer.tell()
    return written
