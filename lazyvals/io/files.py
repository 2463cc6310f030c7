"""File readers."""

from __future__ import annotations

import os
from pathlib import Path

from .action import IO


class BytesFile(IO[bytes]):
    """
    Read a whole file as bytes, once per `run()`.

    Example:
        match BytesFile("build.gradle").run():
            case Ok(contents): ...
            case Error(exc): ...  # OSError, never raised
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    def action(self) -> bytes:
        return self._path.read_bytes()

    def __repr__(self) -> str:
        return f"BytesFile({str(self._path)!r})"


class TextFile(IO[str]):
    """
    Read a whole file as text, once per `run()`.

    NOTE: Decoding errors come back as Error(UnicodeDecodeError) like any
          other failure of the action.
    """

    def __init__(self, path: str | os.PathLike[str], *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self.encoding = encoding

    def action(self) -> str:
        return self._path.read_text(encoding=self.encoding)

    def __repr__(self) -> str:
        return f"TextFile({str(self._path)!r}, encoding={self.encoding!r})"


__all__ = ("BytesFile", "TextFile")
