from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PurifyOptions:
    output: str | None = None  # path to write the purified CSS to
    minify: bool = False
    info: bool = False  # log size reduction and timing
    rejected: bool = False  # log rejected selectors

    def merged(self, **overrides: object) -> PurifyOptions:
        """Return a copy with the non-None *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_OPTIONS = PurifyOptions()
