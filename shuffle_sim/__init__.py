"""
Shuffle Randomness Simulator
"""

from .engine.deck import Card, Color, ValueKind, Hand, generate_deck
from .engine.shuffles import ShuffleType, ShuffleStep, shuffle_deck, riffle_shuffle, overhand_shuffle
from .engine.dealer import deal_hands
from .engine.analyzer import analyze_randomness, calculate_entropy

__version__ = "0.1.0"
