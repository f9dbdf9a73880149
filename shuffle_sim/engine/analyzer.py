"""
Randomness analysis for shuffle simulation.
Computes category frequencies and Shannon entropy over one batch of hands.
"""

import math
from collections import Counter
from typing import Iterable

from .deck import Color, Hand, NUMBERS


COLOR_ENTROPY = "Color Entropy"
VALUE_ENTROPY = "Value Entropy"

COLOR_LABELS = [c.value for c in Color]
VALUE_LABELS = [f"Number: {n}" for n in NUMBERS] + ["Wild", "Skip"]


def color_key(label: str) -> str:
    return f"Color: {label}"


def value_key(label: str) -> str:
    return f"Value: {label}"


def category_keys() -> list[str]:
    """Every metric key a trial can produce, in report order."""
    keys = [color_key(label) for label in COLOR_LABELS]
    keys += [value_key(label) for label in VALUE_LABELS]
    keys += [COLOR_ENTROPY, VALUE_ENTROPY]
    return keys


def count_categories(hands: Iterable[Hand]) -> tuple[Counter, Counter, int]:
    """Count colors and values across all cards in all hands."""
    color_counts = Counter()
    value_counts = Counter()
    total = 0

    for hand in hands:
        for card in hand:
            color_counts[card.color.value] += 1
            value_counts[card.value_label] += 1
            total += 1

    return color_counts, value_counts, total


def calculate_entropy(counts: dict[str, int], total: int) -> float:
    """Shannon entropy (base 2) of a category count distribution."""
    if total <= 0:
        return 0.0

    entropy = 0.0
    for count in counts.values():
        p = count / total
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def analyze_randomness(hands: Iterable[Hand]) -> dict[str, float]:
    """
    Build the metric map for one trial.

    Contains a relative frequency for every observed color ("Color: Red") and
    every observed value ("Value: Number: 7", "Value: Wild"), plus the color
    and value entropies. Categories that were not dealt are left out.
    """
    color_counts, value_counts, total = count_categories(hands)

    metrics = {}

    for label in COLOR_LABELS:
        if color_counts[label]:
            metrics[color_key(label)] = color_counts[label] / total

    for label in VALUE_LABELS:
        if value_counts[label]:
            metrics[value_key(label)] = value_counts[label] / total

    metrics[COLOR_ENTROPY] = calculate_entropy(color_counts, total)
    metrics[VALUE_ENTROPY] = calculate_entropy(value_counts, total)

    return metrics
