"""Domain exceptions for normalization and CLI diagnostics."""

from __future__ import annotations


class NormalizationError(RuntimeError):
    """Raised when a specific normalization stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped normalization error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class UnresolvedMarkerError(NormalizationError):
    """Raised when marker tokens survive normalization in strict mode."""

    def __init__(self, markers: tuple[str, ...]) -> None:
        """Initialize with the surviving marker family names."""

        super().__init__(
            stage="verify",
            detail=f"Unresolved marker(s) in normalized output: {', '.join(markers)}.",
            hint="The emitter wrote a marker in a shape the normalizer does not recognize.",
        )
        self.markers = markers
