from pathlib import Path

import pytest

from klang import Lang, Local


BUNDLE = "messages"

BUNDLES = {
    "messages.properties": (
        "# default bundle\n"
        "hello=Hello\n"
        "farewell = Goodbye\n"
        "only.default: Only in default\n"
    ),
    "messages_zh.properties": "hello=你好\nfarewell=再见\n",
    "messages_en.properties": "hello=Hello there\n",
    "messages_th.properties": "hello=สวัสดี\n",
    "messages_tr.properties": "hello=Merhaba\n",
    "messages_uk.properties": "hello=Привіт\n",
    "messages_ur.properties": "hello=ہیلو\n",
    # a locale with no translations at all
    "messages_xx.properties": "! nothing translated yet\n",
    "messages_bad.properties": "hello=\\u12G4\n",
}


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    for name, content in BUNDLES.items():
        (tmp_path / name).write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def lang(bundle_dir: Path) -> Lang:
    return Lang(BUNDLE, bundle_dir, Local("zh"))
