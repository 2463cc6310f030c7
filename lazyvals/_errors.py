from __future__ import annotations


class CyclicEvaluationError(RuntimeError):
    """A value was lifted again from inside its own computation."""

    def __init__(self) -> None:
        super().__init__("Value lifted while it was still being evaluated")


__all__ = ("CyclicEvaluationError",)
