"""Effect-library descriptor models."""

from sparkfx.core.formats.library.models.curves import (
    AttributeCurve,
    Keyframe,
    TangentHandle,
    new_curve_table,
)
from sparkfx.core.formats.library.models.descriptors import (
    AnimationProperties,
    EffectDescriptor,
    EmitterDescriptor,
)
from sparkfx.core.formats.library.models.enums import (
    LINEAR_ONLY_ATTRIBUTES,
    EffectAttribute,
    EmitterAttribute,
)
from sparkfx.core.formats.library.models.library import EffectLibrary
from sparkfx.core.formats.library.models.sprite import SpriteDescriptor

__all__ = [
    "LINEAR_ONLY_ATTRIBUTES",
    "AnimationProperties",
    "AttributeCurve",
    "EffectAttribute",
    "EffectDescriptor",
    "EffectLibrary",
    "EmitterAttribute",
    "EmitterDescriptor",
    "Keyframe",
    "SpriteDescriptor",
    "TangentHandle",
    "new_curve_table",
]
