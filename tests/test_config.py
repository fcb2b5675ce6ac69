import importlib
import io
import logging
import os
from pathlib import Path

import pytest

from klang.core import config
from klang.core.config import Settings, load_settings
from klang.core.logging_config import LOGGING_CONFIG, ColoredFormatter, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LANG_BUNDLE", "LANG_BUNDLE_DIR", "DEFAULT_LANG", "LANG_FILE_ENCODING", "SWEEPERS_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = {name: logging.getLogger(name).level for name in LOGGING_CONFIG}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)


def test_settings_defaults(clean_env):
    s = Settings(_env_file=None)
    assert s.LANG_BUNDLE == "messages"
    assert s.LANG_BUNDLE_DIR == Path("locales")
    assert s.DEFAULT_LANG == ""
    assert s.LANG_FILE_ENCODING == "utf-8"
    assert s.SWEEPERS_THRESHOLD == 0


def test_settings_from_env(clean_env, monkeypatch):
    monkeypatch.setenv("LANG_BUNDLE", "ui")
    monkeypatch.setenv("LANG_BUNDLE_DIR", "/srv/i18n")
    monkeypatch.setenv("DEFAULT_LANG", " zh ")
    monkeypatch.setenv("SWEEPERS_THRESHOLD", "8")

    s = Settings(_env_file=None)

    assert s.LANG_BUNDLE == "ui"
    assert s.LANG_BUNDLE_DIR == Path("/srv/i18n")
    assert s.DEFAULT_LANG == "zh"
    assert s.SWEEPERS_THRESHOLD == 8


def test_settings_negative_threshold_is_clamped(clean_env, monkeypatch):
    monkeypatch.setenv("SWEEPERS_THRESHOLD", "-4")
    assert Settings(_env_file=None).SWEEPERS_THRESHOLD == 0


def test_settings_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LANG_BUNDLE=app\nSWEEPERS_THRESHOLD=3\n", encoding="utf-8")

    s = Settings(_env_file=env_file)

    assert s.LANG_BUNDLE == "app"
    assert s.SWEEPERS_THRESHOLD == 3


def test_setup_logging_writes_to_stream(restore_logging):
    stream = io.StringIO()
    setup_logging(stream=stream)

    logging.getLogger("klang.core.lang").info("cached %r", "zh")
    logging.getLogger("klang.infra.properties").debug("hidden")

    output = stream.getvalue()
    assert "Logging configured (console=INFO)" in output
    assert "cached 'zh'" in output
    assert "hidden" not in output


def test_setup_logging_debug(restore_logging):
    stream = io.StringIO()
    setup_logging(debug=True, stream=stream)

    logging.getLogger("klang.infra.properties").debug("Loaded 3 keys")

    assert "Loaded 3 keys" in stream.getvalue()


def test_load_settings_reads_env_file_into_environment(clean_env, monkeypatch, tmp_path):
    # start from a recorded value so the variable is removed again on teardown
    monkeypatch.setenv("LANG_BUNDLE", "placeholder")
    monkeypatch.delenv("LANG_BUNDLE")
    env_file = tmp_path / ".env"
    env_file.write_text("LANG_BUNDLE=ui\n", encoding="utf-8")

    s = load_settings(env_file)

    assert s.LANG_BUNDLE == "ui"
    assert os.environ["LANG_BUNDLE"] == "ui"


def test_load_settings_keeps_existing_environment(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("LANG_BUNDLE", "from-env")
    env_file = tmp_path / ".env"
    env_file.write_text("LANG_BUNDLE=from-file\n", encoding="utf-8")

    assert load_settings(env_file).LANG_BUNDLE == "from-env"


def test_importing_config_does_not_touch_environment(clean_env, monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("LANG_BUNDLE=leaked\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    importlib.reload(config)

    assert "LANG_BUNDLE" not in os.environ


def test_formatter_marks_klang_loggers():
    formatter = ColoredFormatter("%(levelname)s %(name)s %(message)s")
    own = logging.LogRecord("klang.core.lang", logging.INFO, __file__, 1, "cached", None, None)
    other = logging.LogRecord("app", logging.WARNING, __file__, 1, "hello", None, None)

    own_line = formatter.format(own)
    other_line = formatter.format(other)

    assert f"{ColoredFormatter.BOLD}klang.core.lang{ColoredFormatter.RESET}" in own_line
    assert f"{ColoredFormatter.LEVEL_COLORS[logging.INFO]}INFO" in own_line
    assert ColoredFormatter.BOLD not in other_line
    # the record is restored for the next handler
    assert own.name == "klang.core.lang"
    assert own.levelname == "INFO"
