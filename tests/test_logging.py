import logging
from contextlib import contextmanager
import pytest
from variantgen import config, utils
from variantgen.utils import get_logger, parse_log_level


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@contextmanager
def _fresh_root():
    """Give get_logger an unconfigured root logger, then put the old one back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture(autouse=True)
def unconfigured(monkeypatch):
    monkeypatch.setattr(utils, "_logger_initialized", False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")


def test_dotenv_log_level_reaches_root_logger(monkeypatch, tmp_path):
    monkeypatch.delenv("LOG_LEVEL")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    config.load_env()
    assert config.get_settings().log_level == "DEBUG"
    with _fresh_root() as root:
        get_logger("variantgen")
        assert root.level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    collected = _Collect()
    named = logging.getLogger("variantgen.test")
    named.addHandler(collected)
    try:
        with _fresh_root() as root:
            get_logger("variantgen.test")
            assert root.level == logging.INFO
    finally:
        named.removeHandler(collected)
    assert config.get_settings().log_level == "INFO"
    messages = [r.getMessage() for r in collected.records if r.levelno == logging.WARNING]
    assert messages == ["Unknown LOG_LEVEL 'verbose', using INFO"]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", "DEBUG"),
        (" Warning ", "WARNING"),
        ("verbose", "INFO"),
        ("", "INFO"),
        (None, "INFO"),
    ],
)
def test_parse_log_level(raw, expected):
    assert parse_log_level(raw) == expected
