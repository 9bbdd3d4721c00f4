"""Configuration for tinyemitter emitters."""

from tinyemitter.config.emitter_config import DEFAULT_OPTIONS
from tinyemitter.config.emitter_config import EmitterOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "EmitterOptions",
]
