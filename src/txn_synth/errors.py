"""Typed errors for ingest, sampling and chain generation."""

from __future__ import annotations

from typing import Any


class SynthError(Exception):
    """Base class for txn_synth errors."""


class MalformedInputError(SynthError, ValueError):
    """Input line does not split into blockId,sender,recipient,amount."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed input at line {line_number}: expected at least 4 comma-separated "
            f"fields (blockId,sender,recipient,amount), got {line!r}"
        )


class SamplingExhaustionError(SynthError):
    """No outcome could be drawn for a composite key (empty or malformed distribution)."""

    def __init__(self, key: Any = None, draw: float | None = None) -> None:
        self.key = key
        self.draw = draw
        msg = f"No candidate for sampling key {key!r}"
        if draw is not None:
            msg += f" (draw={draw!r})"
        super().__init__(msg)


class ChainGenerationError(SynthError):
    """Chain generation aborted at a step whose composite key had no observations."""

    def __init__(self, step: int, field: str, key: Any) -> None:
        self.step = step
        self.field = field
        self.key = key
        super().__init__(
            f"Chain generation aborted at step {step}: no observed {field} for key {key!r}"
        )


class EmptyDatasetError(SynthError):
    """Nothing to seed the chain from."""
