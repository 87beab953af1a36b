"""Tests for DieStyle validation and serialisation."""

import numpy as np
import pytest

from tetradie.errors import InvalidConfigurationError
from tetradie.model.die_style import DieStyle


class TestDieStyleDefaults:
    def test_defaults(self):
        style = DieStyle()
        assert style.label_offset == 0.1
        assert style.rotation_angle == pytest.approx(np.pi)
        assert style.rotation_duration == 3.0
        assert style.face_colour == "orange"
        assert style.label_colour == "black"


class TestDieStyleValidation:
    @pytest.mark.parametrize("field", [
        "label_offset", "rotation_duration", "font_size", "marker_radius",
    ])
    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive_raises(self, field, value):
        with pytest.raises(InvalidConfigurationError, match=field):
            DieStyle(**{field: value})

    def test_infinite_angle_raises(self):
        with pytest.raises(InvalidConfigurationError, match="rotation_angle"):
            DieStyle(rotation_angle=float("inf"))

    def test_tiny_offset_allowed(self):
        assert DieStyle(label_offset=1e-4).label_offset == 1e-4

    def test_colours_not_interpreted(self):
        style = DieStyle(face_colour="not-a-colour", label_colour=object())
        assert style.face_colour == "not-a-colour"


class TestDieStyleSerialisation:
    def test_defaults_serialise_empty(self):
        assert DieStyle().to_dict() == {}

    def test_non_defaults_serialised(self):
        d = DieStyle(label_offset=1e-4, face_colour=(1.0, 0.0, 0.0)).to_dict()
        assert d == {"label_offset": 1e-4, "face_colour": [1.0, 0.0, 0.0]}

    def test_round_trip(self):
        style = DieStyle(
            label_offset=0.02,
            rotation_duration=1.5,
            face_colour=(0.2, 0.4, 0.6),
            show_label_markers=True,
        )
        assert DieStyle.from_dict(style.to_dict()) == style

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="unknown"):
            DieStyle.from_dict({"label_ofset": 0.1})
