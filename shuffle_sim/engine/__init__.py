"""
Shuffle simulation engine components.
"""

from .deck import Card, Color, ValueKind, Hand, generate_deck, DECK_SIZE, REAL_COLORS, NUMBERS
from .shuffles import (ShuffleType, ShuffleStep, shuffle_deck, riffle_shuffle, overhand_shuffle,
                       apply_shuffles)
from .dealer import deal_hands
from .analyzer import analyze_randomness, calculate_entropy, count_categories, category_keys
