"""Tests for Face validation."""

import pytest

from tetradie.model.placement import Face


class TestFace:
    def test_text_is_decimal_label(self):
        assert Face(indices=(0, 1, 2), label=3).text == "3"

    @pytest.mark.parametrize("indices", [(0, 0, 1), (0, 1, 4), (-1, 1, 2), (0, 1)])
    def test_bad_indices_raise(self, indices):
        with pytest.raises(ValueError, match="distinct"):
            Face(indices=indices, label=1)

    @pytest.mark.parametrize("label", [0, 5])
    def test_bad_label_raises(self, label):
        with pytest.raises(ValueError, match="label"):
            Face(indices=(0, 1, 2), label=label)
