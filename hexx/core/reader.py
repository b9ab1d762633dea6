from __future__ import annotations

from hexx.core.errors import FileOpenError, FileReadError


def read_file(path: str) -> bytes:
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc
    with handle:
        try:
            return handle.read()
        except OSError as exc:
            raise FileReadError(path, exc.strerror or str(exc)) from exc
