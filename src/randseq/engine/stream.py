"""Token stream over a generated sequence and adapters for text sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

from .generator import RandomSequenceGenerator

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "; "


class TextSink(Protocol):
    """Anything with a ``write(str)`` method, e.g. ``sys.stdout``."""

    def write(self, text: str, /) -> object: ...


class RandomNumberStream(Iterator[str]):
    """One-shot iterator of formatted number tokens.

    The whole batch is computed by a single ``generate`` call on the first
    ``next``; tokens are then handed out one at a time. Once exhausted the
    stream stays exhausted. Build a new stream for another batch.
    """

    def __init__(
        self,
        generator: RandomSequenceGenerator,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.generator = generator
        self.separator = separator
        self._numbers: list[int] | None = None
        self._position = 0
        self._finished = False

    @property
    def numbers(self) -> list[int] | None:
        """The produced batch, or None before the first token is read."""
        return None if self._numbers is None else list(self._numbers)

    @property
    def finished(self) -> bool:
        return self._finished

    def __iter__(self) -> RandomNumberStream:
        return self

    def __next__(self) -> str:
        if self._finished:
            raise StopIteration
        if self._numbers is None:
            self._numbers = self.generator.generate()

        if self._position >= len(self._numbers):
            self._finished = True
            raise StopIteration

        number = self._numbers[self._position]
        self._position += 1
        return f"{number}{self.separator}"


@dataclass(frozen=True)
class StreamResult:
    """Outcome of one produce-and-consume cycle."""

    ok: bool
    count: int
    error: BaseException | None = None

    def raise_for_error(self) -> None:
        """Re-raise the captured error, if any."""
        if self.error is not None:
            raise self.error


def pipe(stream: Iterator[str], sink: TextSink) -> StreamResult:
    """Write every token from ``stream`` to ``sink``.

    Stops at the first failure, whether raised by the stream or by the sink, and
    reports it in the returned result instead of raising.
    """
    count = 0
    try:
        for token in stream:
            sink.write(token)
            count += 1
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except Exception as exc:
        logger.error("Stream failed after %d tokens: %s", count, exc)
        return StreamResult(ok=False, count=count, error=exc)

    logger.debug("Stream finished with %d tokens.", count)
    return StreamResult(ok=True, count=count)


def submit_pipe(
    stream: Iterator[str],
    sink: TextSink,
    executor: ThreadPoolExecutor | None = None,
) -> Future[StreamResult]:
    """Run ``pipe`` in a worker thread and return a future for its result."""
    if executor is not None:
        return executor.submit(pipe, stream, sink)

    own_executor = ThreadPoolExecutor(max_workers=1)
    try:
        return own_executor.submit(pipe, stream, sink)
    finally:
        own_executor.shutdown(wait=False)
