"""Unit tests for session logging."""

import sys

import pytest
from loguru import logger

from folio import __version__
from folio.contexts.rendering.logger import log_page_plan, setup_rendering_logger
from folio.utils.logger import folio_environment, session_log_dir, setup_logger


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def read_log(log_file):
    # Closing the sinks flushes the file
    logger.remove()
    return log_file.read_text(encoding="utf-8")


@pytest.mark.unit
def test_session_log_dir_is_named_after_command(tmp_path):
    log_dir = session_log_dir("export", tmp_path)

    assert log_dir.parent == tmp_path
    assert log_dir.name.startswith("export_")
    assert not log_dir.exists()


@pytest.mark.unit
def test_setup_logger_writes_session_header(tmp_path):
    log_file = setup_logger("intake", tmp_path / "session", extra_provenance={"Format": "html"})

    assert log_file == tmp_path / "session" / "intake.log"
    text = read_log(log_file)
    assert f"FOLIO {__version__} (intake)" in text
    assert "Format: html" in text


@pytest.mark.unit
def test_header_records_folio_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("FOLIO_MIN_SLACK_PX", "40")
    monkeypatch.setenv("UNRELATED_SETTING", "x")

    text = read_log(setup_logger("render", tmp_path))

    assert "FOLIO_MIN_SLACK_PX: 40" in text
    assert "UNRELATED_SETTING" not in text


@pytest.mark.unit
def test_folio_environment_is_sorted(monkeypatch):
    monkeypatch.setenv("FOLIO_ZETA", "1")
    monkeypatch.setenv("FOLIO_ALPHA", "2")

    keys = list(folio_environment())

    assert keys == sorted(keys)
    assert {"FOLIO_ALPHA", "FOLIO_ZETA"} <= set(keys)


@pytest.mark.unit
def test_context_messages_carry_prefix_and_debug_detail(tmp_path):
    log_file = setup_rendering_logger(tmp_path)
    log_page_plan((388, 1200), 562, [(0, 500), (500, 1062), (1062, 1200)])

    text = read_log(log_file)
    assert "[render] Bitmap 388x1200px, page height 562px -> 3 page(s)" in text
    assert "[render]   Page 2: [500, 1062) (562px)" in text
    assert "Page: A4, 8mm margins" in text
