"""Localized text lookup over per-locale ``.properties`` bundles.

A bundle is a family of files sharing one name: ``messages.properties``
holds the defaults and ``messages_<locale>.properties`` the translations
for each locale. ``Lang`` caches the bundles it has loaded so switching
between locales it has already seen needs no file access.
"""
from .core.encoders import default_encoder, encoder_gbk_utf8, encoder_identity
from .core.errors import KlangError, LoadError, ResourceNotFoundError, ResourceParseError
from .core.lang import DEFAULT_SWEEPERS_THRESHOLD, Lang, production_path
from .core.locales import LOCAL_NONE, Local

__all__ = [
    "DEFAULT_SWEEPERS_THRESHOLD",
    "KlangError",
    "LOCAL_NONE",
    "Lang",
    "LoadError",
    "Local",
    "ResourceNotFoundError",
    "ResourceParseError",
    "default_encoder",
    "encoder_gbk_utf8",
    "encoder_identity",
    "production_path",
]
