#!/usr/bin/env python3
"""
Entry point for shuffle simulation.
Prints the reference randomness report, then compares every shuffle preset.
"""

import time

from shuffle_sim.presets import PRESETS
from shuffle_sim.simulator import Simulator, SimulationConfig


def reference_run(sim: Simulator, iterations: int = 1000):
    """Run the default configuration and print its report."""
    result = sim.run_batch(SimulationConfig(iterations=iterations))
    print(result.report())
    return result


def compare_presets(sim: Simulator, iterations: int = 1000, shuffle_times: int = 2):
    """Run every preset and print average entropies side by side."""
    print("\n" + "=" * 70)
    print(f"PRESET COMPARISON ({iterations} trials each, {shuffle_times} repetitions)")
    print("=" * 70)

    results = {}
    for key, preset in PRESETS.items():
        start_time = time.time()
        config = SimulationConfig(iterations=iterations, shuffle_times=shuffle_times, preset=key)
        results[key] = sim.run_batch(config)
        elapsed = time.time() - start_time
        print(f"  {preset.name:<22} done ({elapsed:.1f}s)")

    print("-" * 70)
    print(f"{'Preset':<24} {'Steps':<28} {'Color H':>8} {'Value H':>8}")
    print("-" * 70)
    for key, result in results.items():
        steps = ", ".join(str(s) for s in PRESETS[key].steps) or "-"
        print(f"{PRESETS[key].name:<24} {steps:<28} "
              f"{result.avg_color_entropy:>8.4f} {result.avg_value_entropy:>8.4f}")

    return results


def main():
    sim = Simulator()
    reference_run(sim)
    compare_presets(sim)


if __name__ == "__main__":
    main()
