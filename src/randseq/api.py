"""FastAPI app exposing the generator over HTTP."""

from __future__ import annotations

from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from randseq import __version__
from randseq.config.schema import GenerationParams
from randseq.engine.errors import GenerationError
from randseq.engine.generator import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, RandomSequenceGenerator
from randseq.engine.stream import RandomNumberStream

MAX_AMOUNT = 100_000


class GenerateRequest(BaseModel):
    """Request payload for generation endpoints."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    amount: int = Field(default=7, gt=0, le=MAX_AMOUNT)
    min: int = Field(default=1, ge=MIN_SAFE_INTEGER, le=MAX_SAFE_INTEGER)
    max: int = Field(default=49, ge=MIN_SAFE_INTEGER, le=MAX_SAFE_INTEGER)
    is_unique: bool = Field(default=False, validation_alias=AliasChoices("is_unique", "isUnique"))
    seed: int | None = Field(default=None, ge=0, le=2**63 - 1)

    def to_params(self) -> GenerationParams:
        return GenerationParams.model_validate(self.model_dump())


class GenerateResponse(BaseModel):
    """Response payload for ``POST /api/generate``."""

    params: GenerationParams
    strategy: Literal["non_unique", "shuffle", "rejection"]
    numbers: list[int]


app = FastAPI(title="randseq", version=__version__)


def build_generator(params: GenerationParams) -> RandomSequenceGenerator:
    """Return a generator for ``params``, mapping generation errors to HTTP 400."""

    try:
        return params.build_generator()
    except GenerationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/generate", response_model=GenerateResponse)
def generate(payload: GenerateRequest) -> GenerateResponse:
    """Generate a full sequence and return it as JSON."""

    params = payload.to_params()
    generator = build_generator(params)
    return GenerateResponse(
        params=params,
        strategy=generator.strategy,
        numbers=generator.generate(),
    )


@app.post("/api/generate/stream")
def generate_stream(payload: GenerateRequest) -> StreamingResponse:
    """Stream formatted number tokens as plain text."""

    generator = build_generator(payload.to_params())
    return StreamingResponse(RandomNumberStream(generator), media_type="text/plain")
