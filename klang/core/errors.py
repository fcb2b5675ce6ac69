from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


PathLike = Union[str, Path]


class KlangError(Exception):
    """Base class for every error raised by klang."""


class LoadError(KlangError):
    """A bundle resource could not be loaded.

    Raised by ``Lang`` construction (fatal for that instance) and by
    ``Lang.set_local`` on a cache miss, in which case the cache is left
    exactly as it was before the call.
    """

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ResourceNotFoundError(LoadError):
    def __init__(self, path: PathLike) -> None:
        super().__init__(path, "resource not found")


class ResourceParseError(LoadError):
    def __init__(self, path: PathLike, line: Optional[int], reason: str) -> None:
        self.line = line
        if line is not None:
            reason = f"line {line}: {reason}"
        super().__init__(path, reason)
