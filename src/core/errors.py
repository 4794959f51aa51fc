"""Errors raised by the puzzle generators."""

from typing import Optional


class GenerationFailure(RuntimeError):
    """A generator ran out of attempts or search steps without producing a puzzle."""

    def __init__(
        self,
        kind: str,
        size: int,
        seed: Optional[str] = None,
        attempts: int = 0,
        reason: str = "",
    ):
        self.kind = kind
        self.size = size
        self.seed = seed
        self.attempts = attempts
        self.reason = reason
        message = f"Failed to generate {kind} puzzle of size {size} after {attempts} attempts"
        if seed:
            message += f" (seed={seed!r})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
