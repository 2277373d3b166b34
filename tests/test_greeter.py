"""Greeter stories: say_hello against captured stdout and injected sinks."""

from __future__ import annotations

import contextlib
import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import hellolib
from hellolib.adapters.memory import GreetingRecorder
from hellolib.application.greeter import say_hello

# ======================== default sink: standard output ========================


@pytest.mark.os_agnostic
def test_say_hello_world_prints_greeting(capsys: pytest.CaptureFixture[str]) -> None:
    """Greeting "World" writes exactly one line to stdout."""
    say_hello("World")

    captured = capsys.readouterr()
    assert captured.out == "Hello World!\n"
    assert captured.err == ""


@pytest.mark.os_agnostic
def test_say_hello_empty_target_prints_bare_greeting(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty target is accepted and leaves nothing between the template pieces."""
    say_hello("")

    assert capsys.readouterr().out == "Hello !\n"


@pytest.mark.os_agnostic
def test_say_hello_twice_prints_two_identical_lines(capsys: pytest.CaptureFixture[str]) -> None:
    """Repeated calls share no state and produce independent lines."""
    say_hello("Alice")
    say_hello("Alice")

    assert capsys.readouterr().out == "Hello Alice!\nHello Alice!\n"


@pytest.mark.os_agnostic
def test_say_hello_keeps_embedded_whitespace(capsys: pytest.CaptureFixture[str]) -> None:
    """Embedded spaces are neither escaped nor truncated."""
    say_hello("New York")

    assert capsys.readouterr().out == "Hello New York!\n"


@pytest.mark.os_agnostic
def test_say_hello_returns_none(capsys: pytest.CaptureFixture[str]) -> None:
    """The operation has no return value."""
    assert say_hello("World") is None  # type: ignore[func-returns-value]


@pytest.mark.os_agnostic
def test_say_hello_resolves_stdout_at_call_time() -> None:
    """A stdout redirection installed after import receives the greeting."""
    buffer = io.StringIO()

    with contextlib.redirect_stdout(buffer):
        say_hello("World")

    assert buffer.getvalue() == "Hello World!\n"


@pytest.mark.os_agnostic
def test_package_exports_say_hello(capsys: pytest.CaptureFixture[str]) -> None:
    """The top-level package exposes the same operation."""
    hellolib.say_hello("World")

    assert capsys.readouterr().out == "Hello World!\n"


# ======================== injected sinks ========================


@pytest.mark.os_agnostic
def test_say_hello_writes_to_injected_sink_only(capsys: pytest.CaptureFixture[str]) -> None:
    """An explicit sink receives the line and stdout stays untouched."""
    buffer = io.StringIO()

    say_hello("World", sink=buffer)

    assert buffer.getvalue() == "Hello World!\n"
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_say_hello_issues_a_single_write(recorder: GreetingRecorder) -> None:
    """The whole line reaches the sink in one write call."""
    say_hello("New York", sink=recorder)

    assert recorder.writes == ["Hello New York!\n"]


@pytest.mark.os_agnostic
def test_say_hello_does_not_flush() -> None:
    """No explicit flush is issued; buffering is left to the sink."""

    class FlushCountingSink(io.StringIO):
        flushes = 0

        def flush(self) -> None:
            self.flushes += 1
            super().flush()

    sink = FlushCountingSink()

    say_hello("World", sink=sink)

    assert sink.flushes == 0


@pytest.mark.os_agnostic
def test_say_hello_propagates_closed_sink_error() -> None:
    """Writing to a closed stream raises the stream's own error unchanged."""
    sink = io.StringIO()
    sink.close()

    with pytest.raises(ValueError, match="closed"):
        say_hello("World", sink=sink)


@pytest.mark.os_agnostic
def test_say_hello_propagates_broken_pipe(recorder: GreetingRecorder) -> None:
    """OS-level write failures are not wrapped or swallowed."""
    failure = BrokenPipeError(32, "Broken pipe")
    recorder.raise_exception = failure

    with pytest.raises(BrokenPipeError) as exc_info:
        say_hello("World", sink=recorder)

    assert exc_info.value is failure
    assert recorder.writes == []


# ======================== properties ========================


@pytest.mark.os_agnostic
@given(target=st.text())
@settings(max_examples=200)
def test_say_hello_output_is_prefix_target_suffix_terminator(target: str) -> None:
    """For any text the sink receives exactly prefix + target + "!" + newline."""
    sink = GreetingRecorder()

    say_hello(target, sink=sink)

    assert sink.writes == ["Hello " + target + "!\n"]


@pytest.mark.os_agnostic
@given(target=st.text(), repeats=st.integers(min_value=1, max_value=5))
def test_say_hello_repeated_calls_are_independent(target: str, repeats: int) -> None:
    """N calls produce N identical lines and nothing else."""
    sink = GreetingRecorder()

    for _ in range(repeats):
        say_hello(target, sink=sink)

    assert sink.output == ("Hello " + target + "!\n") * repeats
