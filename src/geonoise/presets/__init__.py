"""Pre-built module trees for geonoise."""

from .granite import create_granite_preset
from .islands import create_islands_preset
from .jade import create_jade_preset
from .terrain import create_terrain_preset
from .wood import create_wood_preset

# Preset registry - maps preset names to factory functions taking a seed
PRESETS = {
    "terrain": create_terrain_preset,
    "islands": create_islands_preset,
    "wood": create_wood_preset,
    "granite": create_granite_preset,
    "jade": create_jade_preset,
}

__all__ = [
    "PRESETS",
    "create_granite_preset",
    "create_islands_preset",
    "create_jade_preset",
    "create_terrain_preset",
    "create_wood_preset",
]
