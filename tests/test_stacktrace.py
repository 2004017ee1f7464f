import signal

import pytest

from mithril import log, stacktrace


@pytest.fixture(autouse=True)
def reset_state():
    previous = log.get_level()
    log.set_level(log.Level.INFO)
    stacktrace.skip_frames(0)
    yield
    stacktrace.skip_frames(0)
    log.set_level(previous)


@pytest.mark.parametrize(
    "signum, name",
    [
        (signal.SIGILL, "illegal instruction"),
        (signal.SIGABRT, "abnormal termination"),
        (signal.SIGFPE, "floating point error"),
        (signal.SIGSEGV, "segmentation fault"),
        (signal.SIGINT, "?"),
    ],
)
def test_signal_name(signum, name):
    assert stacktrace.signal_name(signum) == name


def test_first_frame_is_stacktrace_itself():
    frames = stacktrace.stacktrace()
    assert frames[0].startswith("#0 stacktrace at ")


def test_frames_are_numbered_in_order():
    frames = stacktrace.stacktrace()
    for index, line in enumerate(frames):
        assert line.startswith(f"#{index} ")


def test_skip_frames_drops_innermost():
    stacktrace.skip_frames(1)
    frames = stacktrace.stacktrace()
    assert frames[0].startswith("#0 test_skip_frames_drops_innermost at ")
    assert __file__ in frames[0]


def test_frame_count_is_bounded():
    assert len(stacktrace.stacktrace()) <= 64


def test_skipping_every_frame_exits():
    stacktrace.skip_frames(100_000)
    with pytest.raises(SystemExit) as exc:
        stacktrace.stacktrace()
    assert exc.value.code == 1


def test_signal_handler_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        stacktrace.signal_handler(signal.SIGSEGV, None)
    assert exc.value.code == 1
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "[Info] received signal: segmentation fault"
    assert lines[1].startswith("[Info] found ")
    count = int(lines[1].split()[2])
    assert len(lines) == 2 + count
    assert lines[2].startswith("#0 ")


def test_setup_signal_handlers_installs_and_returns_previous():
    def handler(signum, frame):
        return None

    previous = stacktrace.setup_signal_handlers(handler)
    try:
        assert set(previous) == {
            signal.SIGILL,
            signal.SIGABRT,
            signal.SIGFPE,
            signal.SIGSEGV,
        }
        for signum in previous:
            assert signal.getsignal(signum) is handler
    finally:
        for signum, old in previous.items():
            signal.signal(signum, old)
    for signum, old in previous.items():
        assert signal.getsignal(signum) == old