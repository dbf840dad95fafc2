from __future__ import annotations

from typing import Iterable

from swapmatch.components.match import Match, MatchSet


def accumulate(matches: MatchSet, candidate: Match) -> None:
    """Insert candidate into matches, keeping no duplicate or subset coverage.

    Every existing match is visited before deciding: a candidate may evict one
    match it strictly covers and still be rejected by a later one that covers it.
    """
    keep = True
    for existing in list(matches):
        if candidate.is_strict_superset_of(existing):
            matches.remove(existing)
        elif existing.is_superset_of(candidate):
            keep = False
    if keep:
        matches.append(candidate)


def dedupe(candidates: Iterable[Match]) -> MatchSet:
    matches: MatchSet = []
    for candidate in candidates:
        accumulate(matches, candidate)
    return matches
