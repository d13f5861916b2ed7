import io
import itertools
import logging

from rich import console
import pytest

from floating_duration import Duration, Stopwatch, measure
from floating_duration import timer


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch):
    # each read of the clock advances it by 1.5ms
    ticks = itertools.count(start=0, step=1_500_000)
    monkeypatch.setattr(timer, "current_time", lambda: next(ticks))


@pytest.fixture
def out():
    return console.Console(file=io.StringIO(), width=80)


def test_stopwatch(clock):
    watch = Stopwatch()
    assert watch.running
    assert watch.elapsed == Duration(0, 1_500_000)
    assert watch.stop() == Duration(0, 3_000_000)
    assert not watch.running
    assert watch.stop() == Duration(0, 3_000_000)
    assert watch.elapsed == Duration(0, 3_000_000)


def test_stopwatch_real_clock():
    watch = Stopwatch()
    elapsed = watch.stop()
    assert elapsed.secs >= 0
    assert 0 <= elapsed.subsec_nanos < 1_000_000_000


def test_measure(clock, out: console.Console):
    with measure(console=out) as watch:
        assert watch.running
    assert not watch.running
    assert out.file.getvalue() == "Needed 1.500ms\n"


def test_measure_label(clock, out: console.Console):
    with measure("sleep", console=out):
        pass
    assert out.file.getvalue() == "sleep 1.500ms\n"


def test_measure_decorator(clock, out: console.Console):
    @measure("call", console=out)
    def work():
        return 42

    assert work() == 42
    assert work() == 42
    assert out.file.getvalue() == "call 1.500ms\ncall 1.500ms\n"


def test_measure_raises(clock, out: console.Console):
    with pytest.raises(RuntimeError):
        with measure("failing", console=out):
            raise RuntimeError("boom")
    assert out.file.getvalue() == "failing 1.500ms\n"


def test_measure_quiet(clock, caplog: pytest.LogCaptureFixture, capsys):
    with caplog.at_level(logging.DEBUG, logger="floating_duration.timer"):
        with measure("quiet", console=False):
            pass
    assert capsys.readouterr().out == ""
    assert caplog.messages == ["quiet 1.500ms"]
