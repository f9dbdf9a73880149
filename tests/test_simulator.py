# Tests for trial execution and batch aggregation

import random

import pytest

from shuffle_sim.engine.analyzer import category_keys, COLOR_ENTROPY, VALUE_ENTROPY
from shuffle_sim.engine.shuffles import ShuffleStep, ShuffleType
from shuffle_sim.presets import PRESETS, ShufflePreset
from shuffle_sim.simulator import Simulator, SimulationConfig, run_trial, run_batch


def test_default_config():
    config = SimulationConfig()
    assert config.iterations == 1000
    assert config.shuffle_times == 2
    assert config.num_hands == 4
    assert config.hand_size == 10
    assert config.preset == "none"

@pytest.mark.parametrize("overrides", [
    {"iterations": 0},
    {"shuffle_times": -1},
    {"num_hands": 0},
    {"hand_size": -3},
])
def test_invalid_config(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()

def test_run_trial_counts_cards(rng):
    trial = run_trial(PRESETS["overhand_riffle"].steps, 2, rng=rng)
    assert trial.cards_dealt == 40
    assert trial.cards_remaining == 68
    assert COLOR_ENTROPY in trial.metrics

def test_unshuffled_batch_is_constant():
    result = Simulator().run_batch(SimulationConfig(iterations=25))
    single = run_trial([]).metrics
    assert not result.shuffled
    assert result.avg_color_entropy == pytest.approx(single[COLOR_ENTROPY])
    assert result.avg_value_entropy == pytest.approx(single[VALUE_ENTROPY])
    assert result.averages["Color: Yellow"] == pytest.approx(0.6)
    assert result.averages["Color: Red"] == 0.0
    assert result.contributions["Color: Red"] == 0
    assert result.contributions["Color: Skip"] == 25

def test_averages_cover_every_category(rng):
    result = Simulator(rng).run_batch(SimulationConfig(iterations=50, preset="uniform"))
    assert list(result.averages) == category_keys()
    assert set(result.contributions) == set(category_keys())
    assert result.contributions[COLOR_ENTROPY] == 50
    assert result.shuffled

def test_missing_categories_average_over_all_trials():
    # Three-card deals leave most categories out of any single trial
    sim = Simulator(random.Random(7))
    config = SimulationConfig(iterations=40, preset="uniform", num_hands=1, hand_size=3)
    result = sim.run_batch(config)
    for key in category_keys():
        observed = result.contributions[key]
        assert 0 <= observed <= 40
        if observed == 0:
            assert result.averages[key] == 0.0
    colors = sum(v for k, v in result.averages.items() if k.startswith("Color: "))
    values = sum(v for k, v in result.averages.items() if k.startswith("Value: "))
    assert colors == pytest.approx(1.0)
    assert values == pytest.approx(1.0)

def test_shuffled_batch_has_higher_entropy(rng):
    sim = Simulator(rng)
    flat = sim.run_batch(SimulationConfig(iterations=100))
    mixed = sim.run_batch(SimulationConfig(iterations=100, preset="uniform"))
    assert mixed.avg_color_entropy > flat.avg_color_entropy

def test_zero_shuffle_times_disables_shuffle(rng):
    result = Simulator(rng).run_batch(SimulationConfig(iterations=10, shuffle_times=0, preset="riffle_only"))
    assert not result.shuffled
    assert result.averages["Color: Yellow"] == pytest.approx(0.6)

def test_custom_preset_object(rng):
    preset = ShufflePreset(name="One Riffle", label="1xriffle", description="",
                           steps=[ShuffleStep(ShuffleType.RIFFLE)])
    result = Simulator(rng).run_batch(SimulationConfig(iterations=5, preset=preset))
    assert result.preset_used == "One Riffle"
    assert result.preset_label == "1xriffle"

def test_unknown_preset_raises():
    with pytest.raises(ValueError):
        Simulator().run_batch(SimulationConfig(iterations=5, preset="bogus"))

def test_report_format():
    result = Simulator().run_batch(SimulationConfig(iterations=3))
    lines = result.report().split("\n")
    assert lines[0] == "2 no shuffle (canonical order)"
    assert lines[1] == "Randomness Analysis over 3 iterations:"
    assert lines[2] == "Color: Red: 0.0000"
    assert "Color: Yellow: 0.6000" in lines
    assert lines[-4] == ""
    assert lines[-3] == "Overall Metrics:"
    assert lines[-2] == "Average Color Entropy: 1.5710"
    assert lines[-1] == "Average Value Entropy: 3.6219"
    assert str(result) == result.report()

def test_verbose_progress(capsys):
    Simulator().run_batch(SimulationConfig(iterations=200), verbose=True)
    out = capsys.readouterr().out
    assert "Trial 100/200" in out
    assert "Trial 200/200" in out

def test_to_dict():
    result = run_batch(iterations=2, shuffle_times=1)
    d = result.to_dict()
    assert d["iterations"] == 2
    assert d["shuffle_times"] == 1
    assert d["preset_used"] == "none"
    assert d["averages"] == result.averages

def test_simulator_run_trial(rng):
    trial = Simulator(rng).run_trial("overhand_only", shuffle_times=1)
    assert trial.cards_dealt == 40

def test_partially_observed_key_uses_full_denominator(monkeypatch):
    from shuffle_sim import simulator
    from shuffle_sim.simulator import TrialResult

    calls = []

    def fake_trial(*args, **kwargs):
        calls.append(1)
        metrics = {"Color: Red": 1.0, COLOR_ENTROPY: 0.0, VALUE_ENTROPY: 0.0}
        if len(calls) % 2 == 0:
            metrics = {"Color: Blue": 1.0, COLOR_ENTROPY: 0.0, VALUE_ENTROPY: 0.0}
        return TrialResult(metrics=metrics, cards_dealt=1, cards_remaining=107)

    monkeypatch.setattr(simulator, "run_trial", fake_trial)
    result = Simulator().run_batch(SimulationConfig(iterations=4))
    assert result.averages["Color: Red"] == 0.5
    assert result.averages["Color: Blue"] == 0.5
    assert result.contributions["Color: Red"] == 2
    assert result.contributions["Color: Blue"] == 2
