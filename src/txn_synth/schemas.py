"""Pydantic v2 schemas: transaction records and generation settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ON_EXHAUSTION_VALUES = frozenset({"abort", "reseed"})
MERGE_STRATEGY_VALUES = frozenset({"endpoint", "union_find"})

CompositeKey = tuple[str, str]


class Transaction(BaseModel):
    """One (sender, recipient, amount) record. All fields are opaque tokens."""

    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    amount: str

    @property
    def is_complete(self) -> bool:
        return bool(self.sender and self.recipient and self.amount)

    def to_row(self) -> tuple[str, str, str]:
        return (self.sender, self.recipient, self.amount)


class GenerationSettings(BaseModel):
    """Resolved parameters for one chain generation run."""

    seed: int = 5
    iterations: int = Field(default=5000, ge=1)
    on_exhaustion: Literal["abort", "reseed"] = "abort"
    skip_repeats: bool = False
    merge: Literal["endpoint", "union_find"] = "endpoint"
    skip_incomplete: bool = False
