from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor

import pytest

from randseq.engine import RandomNumberStream, RandomSequenceGenerator, StreamResult, pipe, submit_pipe


class CountingGenerator(RandomSequenceGenerator):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.generate_calls = 0

    def generate(self):
        self.generate_calls += 1
        return super().generate()


class BrokenSink:
    def __init__(self, fail_after: int) -> None:
        self.fail_after = fail_after
        self.tokens: list[str] = []

    def write(self, text: str) -> None:
        if len(self.tokens) >= self.fail_after:
            raise OSError("sink closed")
        self.tokens.append(text)


def test_stream_yields_one_formatted_token_per_number():
    stream = RandomNumberStream(RandomSequenceGenerator(5, min=1, max=9, seed=4))

    tokens = list(stream)

    assert len(tokens) == 5
    assert all(token.endswith("; ") for token in tokens)
    assert [int(token[:-2]) for token in tokens] == stream.numbers


def test_stream_generates_batch_once_lazily():
    generator = CountingGenerator(4, min=1, max=100, seed=1)
    stream = RandomNumberStream(generator)

    assert generator.generate_calls == 0
    assert stream.numbers is None

    list(stream)

    assert generator.generate_calls == 1


def test_stream_is_not_restartable():
    stream = RandomNumberStream(RandomSequenceGenerator(3, min=1, max=9, seed=2))

    first = list(stream)
    second = list(stream)

    assert len(first) == 3
    assert second == []
    assert stream.finished
    with pytest.raises(StopIteration):
        next(stream)


def test_stream_uses_custom_separator():
    stream = RandomNumberStream(RandomSequenceGenerator(2, min=1, max=9, seed=2), separator=",")

    assert all(token.endswith(",") for token in stream)


def test_pipe_writes_all_tokens_and_reports_success():
    sink = io.StringIO()
    stream = RandomNumberStream(RandomSequenceGenerator(6, min=1, max=45, is_unique=True, seed=8))

    result = pipe(stream, sink)

    assert result == StreamResult(ok=True, count=6)
    assert sink.getvalue() == "".join(f"{number}; " for number in stream.numbers)
    result.raise_for_error()


def test_pipe_stops_at_sink_failure_and_reports_once():
    sink = BrokenSink(fail_after=2)
    stream = RandomNumberStream(RandomSequenceGenerator(5, min=1, max=9, seed=1))

    result = pipe(stream, sink)

    assert not result.ok
    assert result.count == 2
    assert len(sink.tokens) == 2
    assert isinstance(result.error, OSError)
    with pytest.raises(OSError, match="sink closed"):
        result.raise_for_error()


def test_pipe_reports_producer_failure():
    def failing_tokens():
        yield "1; "
        raise RuntimeError("producer broke")

    sink = io.StringIO()

    result = pipe(failing_tokens(), sink)

    assert not result.ok
    assert result.count == 1
    assert sink.getvalue() == "1; "


def test_submit_pipe_completes_future_with_result():
    sink = io.StringIO()
    stream = RandomNumberStream(RandomSequenceGenerator(7, min=1, max=49, seed=3))

    result = submit_pipe(stream, sink).result(timeout=5)

    assert result.ok
    assert result.count == 7


def test_submit_pipe_uses_given_executor():
    sink = io.StringIO()
    stream = RandomNumberStream(RandomSequenceGenerator(3, min=1, max=9, seed=3))

    with ThreadPoolExecutor(max_workers=1) as executor:
        future = submit_pipe(stream, sink, executor=executor)
        assert future.result(timeout=5).count == 3
