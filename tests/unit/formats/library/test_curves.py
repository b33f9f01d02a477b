"""Tests for attribute curves and curve tables."""

from __future__ import annotations

from sparkfx.core.formats.library.models.curves import (
    AttributeCurve,
    TangentHandle,
    new_curve_table,
)
from sparkfx.core.formats.library.models.enums import (
    LINEAR_ONLY_ATTRIBUTES,
    EffectAttribute,
    EmitterAttribute,
)


def test_add_appends_in_call_order_without_sorting():
    curve = AttributeCurve()

    curve.add(10.0, 1.0)
    curve.add(0.0, 2.0)
    curve.add(10.0, 1.0)

    assert curve.frames == [10.0, 0.0, 10.0]
    assert curve.values == [1.0, 2.0, 1.0]


def test_new_keyframe_is_linear():
    keyframe = AttributeCurve().add(0.0, 1.0)
    assert keyframe.handle is None
    assert not keyframe.is_curved


def test_set_curve_points_targets_latest_keyframe():
    curve = AttributeCurve()
    first = curve.add(0.0, 0.0)
    second = curve.add(1.0, 1.0)

    curve.set_curve_points(-1.0, 0.5, 1.0, 1.5)

    assert first.handle is None
    assert second.handle == TangentHandle(left_x=-1.0, left_y=0.5, right_x=1.0, right_y=1.5)


def test_set_curve_points_last_write_wins():
    curve = AttributeCurve()
    curve.add(0.0, 0.0)

    curve.set_curve_points(1.0, 1.0, 1.0, 1.0)
    curve.set_curve_points(2.0, 2.0, 2.0, 2.0)

    assert curve.keyframes[0].handle.left_x == 2.0
    assert len(curve.keyframes) == 1


def test_set_curve_points_on_empty_curve_is_noop():
    curve = AttributeCurve()
    curve.set_curve_points(1.0, 2.0, 3.0, 4.0)
    assert curve.is_empty


def test_curve_table_has_every_category():
    effect_table = new_curve_table(EffectAttribute)
    emitter_table = new_curve_table(EmitterAttribute)

    assert set(effect_table) == set(EffectAttribute)
    assert len(effect_table) == 15
    assert len(emitter_table) == 32
    assert all(curve.is_empty for curve in emitter_table.values())


def test_curve_tables_are_independent():
    table = new_curve_table(EffectAttribute)
    table[EffectAttribute.LIFE].add(0.0, 1.0)
    assert table[EffectAttribute.AMOUNT].is_empty


def test_color_channels_are_linear_only():
    assert LINEAR_ONLY_ATTRIBUTES == {
        EmitterAttribute.RED_OVERTIME,
        EmitterAttribute.GREEN_OVERTIME,
        EmitterAttribute.BLUE_OVERTIME,
    }


def test_curve_behaves_as_keyframe_sequence():
    curve = AttributeCurve()
    curve.add(0.0, 1.0)
    curve.add(5.0, 2.0)

    assert len(curve) == 2
    assert curve[-1].frame == 5.0
    assert [k.value for k in curve] == [1.0, 2.0]
    assert curve.model_dump() == {
        "keyframes": [
            {"frame": 0.0, "value": 1.0, "handle": None},
            {"frame": 5.0, "value": 2.0, "handle": None},
        ]
    }
