from __future__ import annotations

from typing import Iterable, List

from filmorate.domain.entities.film import Film


def top_films(films: Iterable[Film], count: int) -> List[Film]:
    """
    Most-liked films first, at most `count` of them. The sort is stable, so
    films with equal like counts keep the order the store listed them in.
    A non-positive count yields an empty list.
    """
    if count <= 0:
        return []
    ranked = sorted(films, key=lambda f: f.like_count, reverse=True)
    return ranked[:count]
