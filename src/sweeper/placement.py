"""
Bomb placement strategies.

A placer receives the board size, the number of bombs, the set of
positions that must stay bomb-free and a random source, and returns the
(col, row) positions of the bombs.
"""
import random
from typing import AbstractSet, Callable, Iterable, List, Tuple

Position = Tuple[int, int]

Placer = Callable[
    [int, int, int, AbstractSet[Position], random.Random], List[Position]
]


def rejection_sampling(
    width: int,
    height: int,
    bomb_count: int,
    excluded: AbstractSet[Position],
    rng: random.Random,
) -> List[Position]:
    """
    Draw uniform positions over the whole grid until enough bombs are placed.

    Draws landing in the excluded set or on an existing bomb are retried.
    The caller guarantees that enough free positions exist.

    Args:
        width: Number of columns.
        height: Number of rows.
        bomb_count: Bombs to place.
        excluded: Positions that must stay bomb-free.
        rng: Random source.

    Returns:
        List of bomb positions, in placement order.
    """
    placed: List[Position] = []
    taken = set()
    while len(placed) < bomb_count:
        position = (rng.randrange(width), rng.randrange(height))
        if position in excluded or position in taken:
            continue
        taken.add(position)
        placed.append(position)
    return placed


def shuffled_candidates(
    width: int,
    height: int,
    bomb_count: int,
    excluded: AbstractSet[Position],
    rng: random.Random,
) -> List[Position]:
    """Sample bomb positions from the precomputed list of allowed cells."""
    candidates = [
        (col, row)
        for row in range(height)
        for col in range(width)
        if (col, row) not in excluded
    ]
    return rng.sample(candidates, bomb_count)


def fixed(positions: Iterable[Position]) -> Placer:
    """
    Build a placer that always returns the same positions.

    Useful for tests and scripted boards. The board still checks the
    result against the bomb count and the opening exclusion zone.

    Args:
        positions: (col, row) bomb positions.

    Returns:
        Placer ignoring its random source.
    """
    chosen = [tuple(position) for position in positions]

    def place(
        width: int,
        height: int,
        bomb_count: int,
        excluded: AbstractSet[Position],
        rng: random.Random,
    ) -> List[Position]:
        return list(chosen)

    return place
