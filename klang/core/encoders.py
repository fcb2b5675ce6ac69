"""Encoders applied to every value returned by ``Lang.get``."""
from __future__ import annotations

import codecs
from typing import Callable


Encoder = Callable[[str], str]


def encoder_gbk_utf8(text: str) -> str:
    """Recover text whose GBK bytes were decoded as Latin-1.

    Only meaningful for bundles read byte-for-byte (``encoding="latin-1"``).
    Text that cannot be Latin-1 encoded, or whose bytes are not valid GBK,
    comes back unchanged.
    """
    try:
        raw = text.encode("latin-1")
    except UnicodeEncodeError:
        return text
    if raw.isascii():
        return text
    try:
        return raw.decode("gbk")
    except UnicodeDecodeError:
        return text


def encoder_identity(text: str) -> str:
    return text


def default_encoder(encoding: str) -> Encoder:
    """Pick the encoder for bundles decoded with ``encoding``.

    Latin-1 keeps the raw file bytes, which may be GBK and need repair.
    Any other decoding already yields proper text.
    """
    if codecs.lookup(encoding).name == "iso8859-1":
        return encoder_gbk_utf8
    return encoder_identity
