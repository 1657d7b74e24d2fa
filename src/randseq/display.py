"""Console sink for generated number streams."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from randseq.config.schema import GenerationParams
from randseq.engine.errors import GenerationError
from randseq.engine.stream import RandomNumberStream, StreamResult, pipe


def display_random_numbers(
    params: GenerationParams,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> StreamResult:
    """Print the parameters, stream the numbers on one line, then a completion note.

    Errors go to ``err`` (stderr by default), never to the number sink.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    params_json = json.dumps(params.model_dump(by_alias=True), indent=2)
    print("\nUsing parameters:", params_json, "\n", file=out)

    try:
        generator = params.build_generator()
    except GenerationError as exc:
        print(f"Stream error: {exc}", file=err)
        return StreamResult(ok=False, count=0, error=exc)

    result = pipe(RandomNumberStream(generator), out)
    if not result.ok:
        print(f"Stream error: {result.error}", file=err)
        return result

    print(file=out)
    print("\nAll random numbers generated.", file=out)
    return result
