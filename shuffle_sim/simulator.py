"""
Main API for shuffle simulation.
Runs many independent trials and averages their randomness metrics.
"""

import random
from dataclasses import dataclass
from typing import Optional, Union

from .engine.deck import generate_deck
from .engine.shuffles import ShuffleStep, apply_shuffles
from .engine.dealer import deal_hands
from .engine.analyzer import analyze_randomness, category_keys, COLOR_ENTROPY, VALUE_ENTROPY
from .presets import ShufflePreset, resolve_preset

NUM_HANDS = 4
HAND_SIZE = 10


@dataclass
class SimulationConfig:
    """Configuration for a batch of trials."""
    iterations: int = 1000
    shuffle_times: int = 2       # Repetitions of the preset's shuffle sequence
    num_hands: int = NUM_HANDS
    hand_size: int = HAND_SIZE
    preset: Union[str, ShufflePreset] = "none"

    def validate(self) -> None:
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if self.shuffle_times < 0:
            raise ValueError(f"shuffle_times cannot be negative, got {self.shuffle_times}")
        if self.num_hands <= 0:
            raise ValueError(f"num_hands must be positive, got {self.num_hands}")
        if self.hand_size <= 0:
            raise ValueError(f"hand_size must be positive, got {self.hand_size}")


@dataclass
class TrialResult:
    """Outcome of a single deal."""
    metrics: dict[str, float]
    cards_dealt: int
    cards_remaining: int


@dataclass
class BatchResult:
    """Averaged metrics over many trials."""
    iterations: int
    shuffle_times: int
    preset_used: str
    preset_label: str
    shuffled: bool
    averages: dict[str, float]
    contributions: dict[str, int]   # Trials in which each key was observed
    avg_color_entropy: float
    avg_value_entropy: float

    def report(self) -> str:
        lines = [
            f"{self.shuffle_times} {self.preset_label}",
            f"Randomness Analysis over {self.iterations} iterations:",
        ]
        for key, value in self.averages.items():
            lines.append(f"{key}: {value:.4f}")

        lines.append("")
        lines.append("Overall Metrics:")
        lines.append(f"Average Color Entropy: {self.avg_color_entropy:.4f}")
        lines.append(f"Average Value Entropy: {self.avg_value_entropy:.4f}")
        return "\n".join(lines)

    def __str__(self):
        return self.report()

    def to_dict(self):
        return {
            "iterations": self.iterations,
            "shuffle_times": self.shuffle_times,
            "preset_used": self.preset_used,
            "preset_label": self.preset_label,
            "shuffled": self.shuffled,
            "averages": self.averages,
            "contributions": self.contributions,
            "avg_color_entropy": self.avg_color_entropy,
            "avg_value_entropy": self.avg_value_entropy,
        }


def run_trial(steps: list[ShuffleStep], shuffle_times: int = 1,
              num_hands: int = NUM_HANDS, hand_size: int = HAND_SIZE,
              rng: Optional[random.Random] = None) -> TrialResult:
    """Build a fresh deck, shuffle it, deal, and analyze the hands."""
    deck = generate_deck()
    apply_shuffles(deck, steps, repetitions=shuffle_times, rng=rng)
    hands = deal_hands(deck, num_hands, hand_size)
    return TrialResult(
        metrics=analyze_randomness(hands),
        cards_dealt=sum(len(h) for h in hands),
        cards_remaining=len(deck),
    )


class Simulator:
    """
    Runs batches of shuffle/deal/analyze trials.

    Usage:
        sim = Simulator()
        batch = sim.run_batch(SimulationConfig(preset="overhand_riffle"))
        print(batch)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def run_trial(self, preset: Union[str, ShufflePreset] = "none", shuffle_times: int = 1,
                  num_hands: int = NUM_HANDS, hand_size: int = HAND_SIZE) -> TrialResult:
        """Run a single trial."""
        _, p = resolve_preset(preset)
        return run_trial(p.steps, shuffle_times, num_hands, hand_size, rng=self.rng)

    def run_batch(self, config: SimulationConfig = None, verbose: bool = False) -> BatchResult:
        """
        Run `config.iterations` trials and average the results.

        Every category key is averaged over the full trial count; a category
        missing from a trial counts as zero for that trial.

        Args:
            config: Batch configuration (defaults to SimulationConfig())
            verbose: Print progress every 100 trials

        Returns:
            BatchResult with averaged metrics
        """
        config = config or SimulationConfig()
        config.validate()
        preset_name, preset = resolve_preset(config.preset)

        totals = {key: 0.0 for key in category_keys()}
        contributions = {key: 0 for key in totals}
        total_color_entropy = 0.0
        total_value_entropy = 0.0

        for i in range(config.iterations):
            if verbose and (i + 1) % 100 == 0:
                print(f"  Trial {i + 1}/{config.iterations}...")

            trial = run_trial(preset.steps, config.shuffle_times,
                              config.num_hands, config.hand_size, rng=self.rng)

            for key, value in trial.metrics.items():
                totals[key] += value
                contributions[key] += 1

            total_color_entropy += trial.metrics[COLOR_ENTROPY]
            total_value_entropy += trial.metrics[VALUE_ENTROPY]

        runs = config.iterations
        return BatchResult(
            iterations=runs,
            shuffle_times=config.shuffle_times,
            preset_used=preset_name,
            preset_label=preset.label,
            shuffled=preset.shuffles and config.shuffle_times > 0,
            averages={key: total / runs for key, total in totals.items()},
            contributions=contributions,
            avg_color_entropy=total_color_entropy / runs,
            avg_value_entropy=total_value_entropy / runs,
        )


# Convenience functions
def run_batch(preset: Union[str, ShufflePreset] = "none", iterations: int = 1000,
              shuffle_times: int = 2, verbose: bool = False) -> BatchResult:
    """Quick batch run with the default simulator."""
    sim = Simulator()
    config = SimulationConfig(iterations=iterations, shuffle_times=shuffle_times, preset=preset)
    return sim.run_batch(config, verbose)
