"""
Dealing for shuffle simulation.
"""

from .deck import Card, Hand


def deal_hands(deck: list[Card], num_hands: int, hand_size: int) -> list[Hand]:
    """
    Deal `hand_size` rounds, one card per hand per round.

    Cards are popped from the end of the deck, so the last card in deck order
    is dealt first. If the deck runs out the remaining hands stay short.
    """
    hands = [Hand() for _ in range(max(num_hands, 0))]

    for _ in range(hand_size):
        for hand in hands:
            if deck:
                hand.add(deck.pop())

    return hands
