"""
Preset shuffle sequences for shuffle simulation.
Each preset is an explicit switch for which shuffles run before dealing.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .engine.shuffles import ShuffleStep, ShuffleType


@dataclass
class ShufflePreset:
    """A named sequence of shuffle steps."""
    name: str
    label: str          # Short tag printed on the first report line
    description: str
    steps: list[ShuffleStep] = field(default_factory=list)

    @property
    def shuffles(self) -> bool:
        return bool(self.steps)


PRESETS = {
    "none": ShufflePreset(
        name="No Shuffle",
        label="no shuffle (canonical order)",
        description="Deal straight from the freshly built deck",
    ),

    "uniform": ShufflePreset(
        name="Uniform",
        label="5xuniform",
        description="Five uniform random permutations",
        steps=[ShuffleStep(ShuffleType.UNIFORM, passes=5)],
    ),

    "overhand_riffle": ShufflePreset(
        name="Overhand + Riffle",
        label="2xoverhand plus riffle",
        description="Two 3-pass overhand shuffles followed by a riffle",
        steps=[
            ShuffleStep(ShuffleType.OVERHAND, passes=3),
            ShuffleStep(ShuffleType.OVERHAND, passes=3),
            ShuffleStep(ShuffleType.RIFFLE),
        ],
    ),

    "riffle_only": ShufflePreset(
        name="Seven Riffles",
        label="7xriffle",
        description="Seven riffle shuffles back to back",
        steps=[ShuffleStep(ShuffleType.RIFFLE, passes=7)],
    ),

    "overhand_only": ShufflePreset(
        name="Overhand Only",
        label="5xoverhand",
        description="A single 5-pass overhand shuffle",
        steps=[ShuffleStep(ShuffleType.OVERHAND, passes=5)],
    ),
}


def get_preset(name: str) -> Optional[ShufflePreset]:
    """Get a preset by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def resolve_preset(preset: Union[str, ShufflePreset]) -> tuple[str, ShufflePreset]:
    """Turn a preset name or object into (name, preset)."""
    if isinstance(preset, ShufflePreset):
        return preset.name, preset

    key = preset.lower().replace(" ", "_")
    p = PRESETS.get(key)
    if p is None:
        raise ValueError(f"Unknown preset: {preset}. Available: {list_presets()}")
    return key, p
