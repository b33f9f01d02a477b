"""Effect-library format - particle effect definitions stored as XML."""

from sparkfx.core.formats.library.builder import EffectTreeBuilder, build_sprite
from sparkfx.core.formats.library.errors import (
    CursorExhaustedError,
    LibraryLoadError,
    MissingRootError,
    NoMoreEffectsError,
    NoMoreShapesError,
)
from sparkfx.core.formats.library.loader import EffectLibraryLoader, load_library
from sparkfx.core.formats.library.models import (
    AttributeCurve,
    EffectAttribute,
    EffectDescriptor,
    EffectLibrary,
    EmitterAttribute,
    EmitterDescriptor,
    Keyframe,
    SpriteDescriptor,
    TangentHandle,
)
from sparkfx.core.formats.library.resolver import find_sprite

__all__ = [
    "AttributeCurve",
    "CursorExhaustedError",
    "EffectAttribute",
    "EffectDescriptor",
    "EffectLibrary",
    "EffectLibraryLoader",
    "EffectTreeBuilder",
    "EmitterAttribute",
    "EmitterDescriptor",
    "Keyframe",
    "LibraryLoadError",
    "MissingRootError",
    "NoMoreEffectsError",
    "NoMoreShapesError",
    "SpriteDescriptor",
    "TangentHandle",
    "build_sprite",
    "find_sprite",
    "load_library",
]
