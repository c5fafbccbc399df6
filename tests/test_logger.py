"""
Tests for the category logger output format and level filtering
"""

import io

from autotween.models.enums import LogCategory, LogLevel
from autotween.utils.logger import (
    BoundLogger, Logger, configure_logger, get_category_logger, get_logger,
)


def test_message_and_tree_details(capsys):
    logger = Logger(min_level=LogLevel.DEBUG, use_colors=False)
    logger.log(LogCategory.ANIMATION, "Animation defined", duration=0.5, records=3)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "ANIMATION" in lines[0]
    assert "✓ Animation defined" in lines[0]
    assert lines[1].strip() == "├─ duration: 0.5"
    assert lines[2].strip() == "└─ records: 3"


def test_details_list_before_kwargs(capsys):
    logger = Logger(use_colors=False)
    logger.info(LogCategory.SYSTEM, "Started", details=["first"], second=2)

    out = capsys.readouterr().out
    assert out.index("first") < out.index("second: 2")


def test_level_filtering(capsys):
    logger = Logger(min_level=LogLevel.WARN, use_colors=False)
    logger.debug(LogCategory.SCHEDULER, "hidden")
    logger.info(LogCategory.SCHEDULER, "hidden too")
    logger.warn(LogCategory.SCHEDULER, "shown")
    logger.error(LogCategory.SCHEDULER, "shown too")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "⚠ shown" in out
    assert "✗ shown too" in out


def test_colors(capsys):
    Logger(use_colors=True).info(LogCategory.CONFIG, "colored")
    assert "\033[" in capsys.readouterr().out


def test_bound_logger_category_override(capsys):
    bound = BoundLogger(Logger(use_colors=False), LogCategory.LOOP)
    bound.info("tick")
    bound.log("moved", category=LogCategory.ELEMENT)
    bound.with_category(LogCategory.CONTEXT).info("pushed")

    lines = capsys.readouterr().out.splitlines()
    assert "LOOP" in lines[0]
    assert "ELEMENT" in lines[1]
    assert "CONTEXT" in lines[2]


def test_configure_logger_updates_bound_loggers(capsys):
    log = get_category_logger(LogCategory.PROPERTY)

    configure_logger(min_level=LogLevel.ERROR, use_colors=False)
    log.warn("filtered")
    assert capsys.readouterr().out == ""

    configure_logger(min_level=LogLevel.DEBUG, use_colors=False)
    log.debug("visible")
    assert "visible" in capsys.readouterr().out
    assert get_logger().min_level == LogLevel.DEBUG


def test_custom_stream(capsys):
    stream = io.StringIO()
    Logger(use_colors=False, stream=stream).warn(LogCategory.LOOP, "to stream", fps=60)

    assert capsys.readouterr().out == ""
    assert stream.getvalue().splitlines()[1].strip() == "└─ fps: 60"
