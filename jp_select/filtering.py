"""Option filtering shared by every select frontend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rapidfuzz import fuzz, process, utils

from jp_select.models import Option


@dataclass(frozen=True)
class FilterResult:
    visible: list[Option]
    total_matches: int

    @property
    def has_more(self) -> bool:
        return self.total_matches > len(self.visible)


def matches_query(option: Option, query: str) -> bool:
    """Case-insensitive substring match over label and secondary text."""

    needle = query.lower()
    label, secondary = option.search_fields()
    return needle in label or needle in secondary


def filter_options(
    options: Sequence[Option],
    query: str,
    limit: int,
    *,
    fuzzy: bool = False,
    fuzzy_score_cutoff: int = 50,
) -> FilterResult:
    """Return the options to render for ``query``, capped at ``limit``.

    A blank query shows every option. Otherwise the query is matched as typed,
    surrounding spaces included. Substring matching keeps source order; with
    ``fuzzy`` enabled the matches are ranked by rapidfuzz WRatio instead.
    """
    if not query.strip():
        matched = list(options)
    elif fuzzy:
        matched = _fuzzy_matches(options, query, fuzzy_score_cutoff)
    else:
        matched = [option for option in options if matches_query(option, query)]
    return FilterResult(visible=matched[: max(limit, 0)], total_matches=len(matched))


def _fuzzy_matches(options: Sequence[Option], query: str, score_cutoff: int) -> list[Option]:
    choices = [
        " ".join(part for part in (option.label, option.secondary_text or "") if part)
        for option in options
    ]
    matches = process.extract(
        query,
        choices,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=None,
        score_cutoff=score_cutoff,
    )
    # matches is list of (match_string, score, index)
    return [options[m[2]] for m in matches]
