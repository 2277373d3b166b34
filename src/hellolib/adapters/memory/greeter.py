"""In-memory greeting sink for testing.

Contents:
    * :class:`GreetingRecorder` - Text sink capturing every greeting write.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...application.greeter import say_hello as _say_hello
from ...application.ports import TextSink


def _empty_write_list() -> list[str]:
    """Create an empty typed list for captured writes."""
    return []


@dataclass
class GreetingRecorder:
    """Capture greeting lines instead of writing them to stdout.

    Acts as a :class:`~hellolib.application.ports.TextSink` and exposes a
    ``say_hello`` method matching the ``SayHello`` port, so it can be wired
    into ``AppServices`` directly. Each test should create its own instance.

    Attributes:
        writes: Every string passed to :meth:`write`, in call order.
        raise_exception: When set, :meth:`write` raises it instead of recording.

    Example:
        >>> recorder = GreetingRecorder()
        >>> recorder.say_hello("Alice")
        >>> recorder.say_hello("Alice")
        >>> recorder.output
        'Hello Alice!\\nHello Alice!\\n'
        >>> len(recorder.writes)
        2
    """

    writes: list[str] = field(default_factory=_empty_write_list)
    raise_exception: Exception | None = None

    def write(self, text: str, /) -> int:
        """Record ``text`` and report it as fully written."""
        if self.raise_exception is not None:
            raise self.raise_exception
        self.writes.append(text)
        return len(text)

    @property
    def output(self) -> str:
        """Everything written so far, concatenated."""
        return "".join(self.writes)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.writes.clear()
        self.raise_exception = None

    def say_hello(self, target: str, *, sink: TextSink | None = None) -> None:
        """Greet ``target`` into this recorder unless another sink is given."""
        _say_hello(target, sink=self if sink is None else sink)


__all__ = ["GreetingRecorder"]
