from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when puzzle parameters cannot produce a playable board."""


class PlacementError(ConfigurationError):
    """Raised when no token layout satisfies the spacing rules within the restart budget."""

    def __init__(self, pair_count: int, restarts: int, message: str | None = None) -> None:
        self.pair_count = pair_count
        self.restarts = restarts
        super().__init__(
            message
            or (
                f"could not place {pair_count} pair(s) after {restarts} layout restart(s); "
                "the canvas is too small for the configured radius and spacing"
            )
        )
