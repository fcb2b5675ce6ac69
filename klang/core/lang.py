from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

from ..infra import properties
from ..infra.properties import PropertySet
from .encoders import Encoder, default_encoder
from .errors import LoadError
from .locales import LOCAL_NONE, Local

if TYPE_CHECKING:
    from .config import Settings


log = logging.getLogger(__name__)

# Threshold installed by set_sweepers when none has been configured yet
DEFAULT_SWEEPERS_THRESHOLD = 5

Sweeper = Callable[["Lang"], None]


def production_path(bundle: str, bundle_dir: Union[str, Path], local: Local) -> Path:
    """Return the bundle file for ``local``.

    LOCAL_NONE maps to the default bundle, which has no locale segment
    ("messages.properties" rather than "messages_zh.properties").
    """
    if local != LOCAL_NONE:
        return Path(bundle_dir) / f"{bundle}_{local}.{properties.EXTENSION}"
    return Path(bundle_dir) / f"{bundle}.{properties.EXTENSION}"


def _no_sweep(lang: Lang) -> None:
    # By default nothing is cleaned up
    return None


class Lang:
    """Localized text lookup over a cache of loaded locale bundles.

    Every locale switched to stays loaded, so switching back to it later
    is a dictionary lookup rather than a file read ("fast switch"). Once
    the number of cached locales reaches the sweeper threshold the sweeper
    is called with this instance and may shrink the cache, typically by
    calling ``reset``.

    Lookups fall back to the default bundle and finally to an empty string.

    Not thread-safe: callers sharing one instance across threads must
    guard it with their own lock.

    Raises LoadError if either the initial or the default bundle cannot
    be loaded.
    """

    def __init__(
        self,
        bundle: str,
        bundle_dir: Union[str, Path],
        local: Local = LOCAL_NONE,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self._bundle = bundle
        self._bundle_dir = Path(bundle_dir)
        self._encoding = encoding

        initial = self._load(local)
        default = self._load(LOCAL_NONE)

        self._default: PropertySet = default
        self._properties: Dict[Local, PropertySet] = {local: initial}
        self._local: Local = local
        self._encoder: Optional[Encoder] = default_encoder(encoding)

        self._sweepers_threshold = 0
        self._sweepers: Sweeper = _no_sweep

    @classmethod
    def from_settings(cls, settings: Settings) -> Lang:
        lang = cls(
            settings.LANG_BUNDLE,
            settings.LANG_BUNDLE_DIR,
            Local(settings.DEFAULT_LANG),
            encoding=settings.LANG_FILE_ENCODING,
        )
        lang.set_sweepers_threshold_value(settings.SWEEPERS_THRESHOLD)
        return lang

    def __repr__(self) -> str:
        return (
            f"Lang(bundle={self._bundle!r}, local={self._local!r}, "
            f"cached={self.fast_switch_size_locals()!r})"
        )

    def _load(self, local: Local) -> PropertySet:
        return properties.load(
            production_path(self._bundle, self._bundle_dir, local), self._encoding
        )

    def set_sweepers(self, sweepers: Sweeper) -> None:
        """Install the callback run when the cache reaches the threshold.

        Keeps memory in check when locales are switched often. If no
        threshold has been set yet, DEFAULT_SWEEPERS_THRESHOLD is used.
        """
        self._sweepers = sweepers
        if self._sweepers_threshold == 0:
            self._sweepers_threshold = DEFAULT_SWEEPERS_THRESHOLD

    def set_sweepers_threshold_value(self, value: int) -> None:
        """Set the cache size that triggers the sweeper; 0 or less disables it."""
        self._sweepers_threshold = max(value, 0)

    def reset(self) -> None:
        """Drop every cached locale except the active one."""
        dropped = len(self._properties) - 1
        self._properties = {self._local: self._properties[self._local]}
        log.info("Reset locale cache, kept %r and dropped %d", self._local, dropped)

    def fast_switch_size(self) -> int:
        return len(self._properties)

    def fast_switch_size_locals(self) -> List[Local]:
        return list(self._properties)

    def get(self, key: str) -> str:
        """Return the text for ``key`` in the active locale.

        Keys missing from the active bundle are taken from the default
        bundle; keys missing from both give an empty string. The encoder,
        when set, is applied to whatever was resolved.
        """
        current = self._properties[self._local]
        if current.has_key(key):
            value = current.get_string(key)
        else:
            value = self._default.get_string(key)
        if self._encoder is not None:
            return self._encoder(value)
        return value

    def set_encoder(self, encoder: Optional[Encoder]) -> None:
        """Set the encoder applied to values returned by ``get``; None disables it."""
        self._encoder = encoder

    def set_local(self, local: Local) -> None:
        """Make ``local`` the active locale.

        Cached locales are switched to without touching the filesystem.
        Otherwise the bundle is loaded first; if that fails LoadError is
        raised and the active locale and cache stay as they were.
        """
        if local in self._properties:
            log.debug("Fast switch to %r", local)
            self._local = local
            return

        try:
            loaded = self._load(local)
        except LoadError as e:
            log.warning("Could not switch to %r: %s", local, e)
            raise

        self._local = local
        self._properties[local] = loaded
        log.info("Cached locale %r (%d cached)", local, len(self._properties))

        if self._sweepers_threshold > 0 and len(self._properties) >= self._sweepers_threshold:
            log.info(
                "Locale cache reached threshold %d, running sweeper",
                self._sweepers_threshold,
            )
            self._sweepers(self)

    def get_local(self) -> Local:
        return self._local
