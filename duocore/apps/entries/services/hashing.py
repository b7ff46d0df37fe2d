from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 64 * 1024


def fingerprint_file(fileobj: BinaryIO, chunk_size: int = CHUNK_SIZE) -> str:
    """
    SHA-256 (hex) sobre todo el contenido. Sólo depende de los bytes, no del
    nombre ni de la fecha: sirve como clave de deduplicación.
    """
    digest = hashlib.sha256()
    if hasattr(fileobj, "seek"):
        fileobj.seek(0)
    for chunk in iter(lambda: fileobj.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()


def fingerprint_path(path: str | Path) -> str:
    with open(path, "rb") as fp:
        return fingerprint_file(fp)
