"""
Shuffle algorithms for shuffle simulation.
Uniform, riffle and overhand shuffles, each reordering a deck in place.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .deck import Card


MIN_RIFFLE_LENGTH = 4    # Below this the +/-2 split window does not fit
RIFFLE_SPLIT_JITTER = 2
MAX_RIFFLE_RUN = 3       # Cards dropped from one half at a time
MAX_OVERHAND_CHUNK = 10


class ShuffleType(Enum):
    UNIFORM = "uniform"
    RIFFLE = "riffle"
    OVERHAND = "overhand"


@dataclass(frozen=True)
class ShuffleStep:
    """A single shuffle invocation inside a shuffle sequence."""
    shuffle_type: ShuffleType
    passes: int = 1

    def __str__(self) -> str:
        return f"{self.shuffle_type.value} x{self.passes}"


def shuffle_deck(deck: list[Card], times: int, rng: Optional[random.Random] = None) -> None:
    """Apply a uniform random permutation to the deck, `times` times."""
    rng = rng or random
    for _ in range(times):
        rng.shuffle(deck)


def riffle_shuffle(deck: list[Card], rng: Optional[random.Random] = None) -> None:
    """
    Simulate one imperfect riffle.

    The deck is cut near the middle (up to two cards either way), then the
    halves are interleaved by dropping runs of 1-3 cards from the left half
    followed by 1-3 cards from the right half until both are empty.

    Decks shorter than MIN_RIFFLE_LENGTH are cut exactly in half; a deck of
    0 or 1 cards is left as is.
    """
    rng = rng or random
    if len(deck) < 2:
        return

    half = len(deck) // 2
    if len(deck) < MIN_RIFFLE_LENGTH:
        mid = half
    else:
        mid = rng.randint(half - RIFFLE_SPLIT_JITTER, half + RIFFLE_SPLIT_JITTER)

    left = deck[:mid]
    right = deck[mid:]
    shuffled = []
    li = 0
    ri = 0

    while li < len(left) or ri < len(right):
        take = rng.randint(1, MAX_RIFFLE_RUN)
        shuffled.extend(left[li:li + take])
        li = min(li + take, len(left))

        take = rng.randint(1, MAX_RIFFLE_RUN)
        shuffled.extend(right[ri:ri + take])
        ri = min(ri + take, len(right))

    deck[:] = shuffled


def overhand_shuffle(deck: list[Card], passes: int, rng: Optional[random.Random] = None) -> None:
    """
    Simulate an overhand shuffle.

    Each pass strips chunks of 1-10 cards off the front of the deck and drops
    each one on top of the new pile, so the last chunk taken ends up first.
    """
    rng = rng or random
    for _ in range(passes):
        source = list(deck)
        shuffled = []
        while source:
            chunk_size = rng.randint(1, min(MAX_OVERHAND_CHUNK, len(source)))
            chunk = source[:chunk_size]
            del source[:chunk_size]
            shuffled[0:0] = chunk
        deck[:] = shuffled


def apply_step(deck: list[Card], step: ShuffleStep, rng: Optional[random.Random] = None) -> None:
    """Run one shuffle step against the deck."""
    if step.shuffle_type == ShuffleType.UNIFORM:
        shuffle_deck(deck, step.passes, rng)
    elif step.shuffle_type == ShuffleType.OVERHAND:
        overhand_shuffle(deck, step.passes, rng)
    elif step.shuffle_type == ShuffleType.RIFFLE:
        for _ in range(step.passes):
            riffle_shuffle(deck, rng)
    else:
        raise ValueError(f"Unknown shuffle type: {step.shuffle_type}")


def apply_shuffles(deck: list[Card], steps: list[ShuffleStep], repetitions: int = 1,
                   rng: Optional[random.Random] = None) -> None:
    """Run the whole step sequence `repetitions` times, in order."""
    for _ in range(repetitions):
        for step in steps:
            apply_step(deck, step, rng)
