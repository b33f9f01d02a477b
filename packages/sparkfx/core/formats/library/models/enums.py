"""Attribute categories of effect and emitter descriptors.

Each member's value is the XML element name the keyframes are read from.
"""

from __future__ import annotations

from enum import Enum


class EffectAttribute(str, Enum):
    """Animatable properties of an effect (global multipliers)."""

    AMOUNT = "AMOUNT"
    LIFE = "LIFE"
    SIZE_X = "SIZEX"
    SIZE_Y = "SIZEY"
    VELOCITY = "VELOCITY"
    WEIGHT = "WEIGHT"
    SPIN = "SPIN"
    ALPHA = "ALPHA"
    EMISSION_ANGLE = "EMISSIONANGLE"
    EMISSION_RANGE = "EMISSIONRANGE"
    AREA_WIDTH = "AREA_WIDTH"
    AREA_HEIGHT = "AREA_HEIGHT"
    ANGLE = "ANGLE"
    STRETCH = "STRETCH"
    GLOBAL_ZOOM = "GLOBAL_ZOOM"


class EmitterAttribute(str, Enum):
    """Animatable properties of an emitter.

    Base values and variations are sampled over the effect's lifetime,
    ``*_OVERTIME`` categories over each particle's lifetime.
    """

    # Base values
    LIFE = "LIFE"
    AMOUNT = "AMOUNT"
    BASE_SPEED = "BASE_SPEED"
    BASE_WEIGHT = "BASE_WEIGHT"
    BASE_SIZE_X = "BASE_SIZE_X"
    BASE_SIZE_Y = "BASE_SIZE_Y"
    BASE_SPIN = "BASE_SPIN"
    SPLATTER = "SPLATTER"

    # Variations
    LIFE_VARIATION = "LIFE_VARIATION"
    AMOUNT_VARIATION = "AMOUNT_VARIATION"
    VELOCITY_VARIATION = "VELOCITY_VARIATION"
    WEIGHT_VARIATION = "WEIGHT_VARIATION"
    SIZE_X_VARIATION = "SIZE_X_VARIATION"
    SIZE_Y_VARIATION = "SIZE_Y_VARIATION"
    SPIN_VARIATION = "SPIN_VARIATION"
    DIRECTION_VARIATION = "DIRECTION_VARIATION"

    # Over particle lifetime
    ALPHA_OVERTIME = "ALPHA_OVERTIME"
    VELOCITY_OVERTIME = "VELOCITY_OVERTIME"
    WEIGHT_OVERTIME = "WEIGHT_OVERTIME"
    SCALE_X_OVERTIME = "SCALE_X_OVERTIME"
    SCALE_Y_OVERTIME = "SCALE_Y_OVERTIME"
    SPIN_OVERTIME = "SPIN_OVERTIME"
    DIRECTION = "DIRECTION"
    DIRECTION_VARIATION_OVERTIME = "DIRECTION_VARIATIONOT"
    FRAMERATE_OVERTIME = "FRAMERATE_OVERTIME"
    STRETCH_OVERTIME = "STRETCH_OVERTIME"
    RED_OVERTIME = "RED_OVERTIME"
    GREEN_OVERTIME = "GREEN_OVERTIME"
    BLUE_OVERTIME = "BLUE_OVERTIME"

    GLOBAL_VELOCITY = "GLOBAL_VELOCITY"
    EMISSION_ANGLE = "EMISSION_ANGLE"
    EMISSION_RANGE = "EMISSION_RANGE"


# Color channels interpolate linearly; tangent handles are never loaded for them.
LINEAR_ONLY_ATTRIBUTES: frozenset[EmitterAttribute] = frozenset(
    {
        EmitterAttribute.RED_OVERTIME,
        EmitterAttribute.GREEN_OVERTIME,
        EmitterAttribute.BLUE_OVERTIME,
    }
)
