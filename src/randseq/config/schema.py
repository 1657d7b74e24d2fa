"""Pydantic schema for generation parameters."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt

from randseq.engine.generator import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, RandomSequenceGenerator


class GenerationParams(BaseModel):
    """Resolved generation parameters with defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    amount: StrictInt = Field(default=7, gt=0)
    min: StrictInt = Field(default=1, ge=MIN_SAFE_INTEGER, le=MAX_SAFE_INTEGER)
    max: StrictInt = Field(default=49, ge=MIN_SAFE_INTEGER, le=MAX_SAFE_INTEGER)
    is_unique: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("is_unique", "isUnique"),
        serialization_alias="isUnique",
    )
    seed: StrictInt | None = Field(default=None, ge=0)

    def build_generator(self) -> RandomSequenceGenerator:
        """Create the generator described by these parameters."""
        return RandomSequenceGenerator(
            self.amount,
            self.min,
            self.max,
            self.is_unique,
            seed=self.seed,
        )
