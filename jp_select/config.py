"""Configuration model for select widgets."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

from jp_common.config.env import parse_bool_env, parse_int_env
from jp_common.errors import ConfigurationError


class SelectConfig(BaseModel):
    """Texts and limits applied to a select widget."""

    placeholder: str = Field(
        default="Select an option",
        description="Header text shown while nothing is selected",
    )
    search_placeholder: str = Field(
        default="Search by name or email...",
        description="Hint shown in the empty search box",
    )
    display_limit: int = Field(
        default=5,
        ge=1,
        description="Maximum number of options rendered at once",
    )
    fuzzy: bool = Field(
        default=False,
        description="Rank matches with rapidfuzz instead of substring order",
    )
    fuzzy_score_cutoff: int = Field(default=50, ge=0, le=100)
    loading_text: str = "Loading options..."
    no_results_text: str = "No results found"
    unavailable_text: str = "Failed to load options. Please try again."
    empty_text: str = "No options available"
    multi_summary: str = "{count} selected"

    model_config = {
        "extra": "ignore",
    }

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "SelectConfig":
        """Build a config, applying ``JP_SELECT_*`` variables under explicit overrides."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        limit = parse_int_env(env.get("JP_SELECT_DISPLAY_LIMIT"), minimum=1)
        if limit is not None:
            values["display_limit"] = limit
        fuzzy = parse_bool_env(env.get("JP_SELECT_FUZZY"))
        if fuzzy is not None:
            values["fuzzy"] = fuzzy
        values.update({key: val for key, val in overrides.items() if val is not None})
        return cls._build(values)

    @classmethod
    def _build(cls, values: dict[str, object]) -> "SelectConfig":
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid select configuration",
                context={"values": values},
                cause=exc,
            ) from exc

    def with_overrides(self, **overrides: object) -> "SelectConfig":
        """Return a validated copy with ``overrides`` applied; None values are skipped."""
        changed = {key: val for key, val in overrides.items() if val is not None}
        return self._build({**self.model_dump(), **changed})

    def summary_text(self, count: int) -> str:
        return self.multi_summary.format(count=count)
