"""Loading of Java-style ``.properties`` bundles."""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Dict, Optional

import javaproperties

from ..core.errors import LoadError, PathLike, ResourceNotFoundError, ResourceParseError

log = logging.getLogger(__name__)


EXTENSION = "properties"


class PropertySet(Mapping):
    """Immutable flat key/value table loaded from one bundle file."""

    def __init__(self, values: Mapping[str, str], path: Optional[Path] = None) -> None:
        self._values: Dict[str, str] = dict(values)
        self.path = path

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertySet(path={str(self.path)!r}, keys={len(self._values)})"

    def has_key(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str) -> str:
        # Absent keys read as an empty string
        return self._values.get(key, "")


def load(path: PathLike, encoding: str = "utf-8") -> PropertySet:
    """Read and parse the bundle at ``path``.

    Raises ResourceNotFoundError when the file is missing and
    ResourceParseError when it cannot be decoded or parsed.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise ResourceNotFoundError(path) from e
    except OSError as e:
        raise LoadError(path, e.strerror or str(e)) from e

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise ResourceParseError(path, None, f"cannot decode as {encoding}: {e.reason}") from e

    try:
        values = javaproperties.loads(text.lstrip("\ufeff"), object_pairs_hook=dict)
    except javaproperties.InvalidUEscapeError as e:
        raise ResourceParseError(path, None, f"malformed \\uXXXX escape: {e.escape}") from e

    log.debug("Loaded %d keys from %s", len(values), path)
    return PropertySet(values, path)
