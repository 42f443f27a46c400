"""Bingo card builder: shuffle the word pool and deal it onto a 5x5 card."""

from __future__ import annotations

import random
from typing import Iterable

from models import BingoCard, NotEnoughWordsError

BINGO_SIZE = 5
FREE_LABEL = "FREE"


def words_needed(free_center: bool = True, size: int = BINGO_SIZE) -> int:
    return size * size - (1 if free_center else 0)


def clean_pool(raw_words: Iterable[str]) -> list[str]:
    words = (w.strip() for w in raw_words)
    return [w for w in words if w]


def generate_bingo_card(
    raw_words: Iterable[str],
    *,
    free_center: bool = True,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> BingoCard:
    """Deal one randomized card.

    Raises NotEnoughWordsError before building anything when the pool has
    fewer than ``words_needed(free_center)`` non-blank words.
    """
    pool = clean_pool(raw_words)
    needed = words_needed(free_center)
    if len(pool) < needed:
        suffix = " (center is FREE)" if free_center else ""
        raise NotEnoughWordsError(
            needed,
            len(pool),
            f"You need at least {needed} words for a "
            f"{BINGO_SIZE}x{BINGO_SIZE} card{suffix}, got {len(pool)}.",
        )

    if rng is None:
        rng = random.Random(seed)

    shuffled = list(pool)
    rng.shuffle(shuffled)
    dealt = iter(shuffled[:needed])

    center = BINGO_SIZE // 2
    rows: list[tuple[str, ...]] = []
    for r in range(BINGO_SIZE):
        row = []
        for c in range(BINGO_SIZE):
            if free_center and r == center and c == center:
                row.append(FREE_LABEL)
            else:
                row.append(next(dealt))
        rows.append(tuple(row))

    return BingoCard(cells=tuple(rows), pool=tuple(pool), free_center=free_center)


def reshuffle_card(
    card: BingoCard,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> BingoCard:
    """Deal a fresh layout from the pool *card* was built from."""
    return generate_bingo_card(
        card.pool, free_center=card.free_center, seed=seed, rng=rng,
    )


def generate_bingo_cards(
    raw_words: Iterable[str],
    count: int = 1,
    *,
    free_center: bool = True,
    seed: int | None = None,
) -> list[BingoCard]:
    """Deal *count* cards from one pool, each a reshuffle of the first."""
    if count <= 0:
        raise ValueError("count must be > 0")

    rng = random.Random(seed)
    card = generate_bingo_card(raw_words, free_center=free_center, rng=rng)
    cards = [card]
    for _ in range(count - 1):
        cards.append(reshuffle_card(card, rng=rng))
    return cards
