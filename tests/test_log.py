import pytest

from mithril import log
from mithril.log import Level


@pytest.fixture(autouse=True)
def restore_level():
    saved = log.get_level()
    yield
    log.set_level(saved)


def test_default_level_is_info():
    assert log.get_level() is Level.INFO


@pytest.mark.parametrize(
    "level, name",
    [
        (Level.DEBUG, "Debug"),
        (Level.INFO, "Info"),
        (Level.WARNING, "Warning"),
        (Level.ERROR, "Error"),
        (Level.OFF, "?"),
    ],
)
def test_level_name(level, name):
    assert log.level_name(level) == name


def test_levels_are_ordered(capsys):
    assert Level.DEBUG < Level.INFO < Level.WARNING < Level.ERROR < Level.OFF
    log.set_level(Level.WARNING)
    log.debug("below")
    log.info("below")
    log.warning("at")
    log.error("above")
    out = capsys.readouterr().out
    assert "below" not in out
    assert "[Warning] at" in out
    assert "[Error] above" in out


def test_set_and_get_level():
    log.set_level(Level.ERROR)
    assert log.get_level() is Level.ERROR


@pytest.mark.parametrize("n", [0, 1, 3, 7])
def test_count_placeholders(n):
    assert log.count_placeholders("x{}" * n) == n


def test_count_placeholders_empty():
    assert log.count_placeholders("") == 0


def test_count_placeholders_ignores_lone_braces():
    assert log.count_placeholders("{ } { x }") == 0


def test_format_message_substitutes_in_order():
    assert log.format_message("{} took {} ms", "load", 12) == "load took 12 ms\n"


def test_format_message_without_placeholders():
    assert log.format_message("no profiling in progress") == "no profiling in progress\n"


def test_format_message_too_many_args():
    with pytest.raises(ValueError):
        log.format_message("profile {} not found", "a", "b")


def test_format_message_too_few_args():
    with pytest.raises(ValueError):
        log.format_message("{} took {} sec", "a")


def test_info_output(capsys):
    log.info("profile {} not found", "x")
    assert capsys.readouterr().out == "[Info] profile x not found\n"


def test_warning_is_yellow(capsys):
    log.warning("careful {}", 1)
    assert capsys.readouterr().out == "\033[33m[Warning] careful 1\n\033[0m"


def test_error_is_red(capsys):
    log.error("no profiling in progress")
    assert capsys.readouterr().out == "\033[31m[Error] no profiling in progress\n\033[0m"


def test_debug_hidden_at_default_level(capsys):
    log.debug("hidden {}", 1)
    assert capsys.readouterr().out == ""


def test_debug_shown_at_debug_level(capsys):
    log.set_level(Level.DEBUG)
    log.debug("shown {}", "x")
    assert capsys.readouterr().out == "[Debug] shown x\n"


def test_off_suppresses_errors(capsys):
    log.set_level(Level.OFF)
    log.error("silent")
    assert capsys.readouterr().out == ""


def test_suppressed_message_is_not_checked(capsys):
    log.set_level(Level.ERROR)
    log.info("{} {}", 1)
    assert capsys.readouterr().out == ""


def test_mismatch_raises_when_emitted():
    with pytest.raises(ValueError):
        log.info("{} {}", 1)