"""Data models for mask scoring and default behavior policy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AffinityWeights(BaseModel):
    """Affinity added per matching event.

    Rules:
    - consumed: input character placed into a mask position
    - not_consumed: mask emitted or skipped a position without consuming input
    - dropped: input character rejected by a mandatory value position
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    consumed: int = 1
    not_consumed: int = -1
    dropped: int = -1


class MaskPolicy(BaseModel):
    """Mask policy loaded from YAML."""

    model_config = ConfigDict(extra="forbid")

    affinity: AffinityWeights = Field(default_factory=AffinityWeights)
    autocomplete: bool = False
