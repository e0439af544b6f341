import pytest

from quotevote.core.aggregation import PositionTally
from quotevote.core.colors import ColorKind, color_of, opacity_for


@pytest.mark.parametrize("count, expected", [
    (0, 0.1), (1, 0.1), (10, 0.1), (35, 0.35), (100, 1.0), (250, 1.0),
])
def test_opacity_is_clamped(count, expected):
    assert opacity_for(count) == pytest.approx(expected)


def test_zero_zero_is_a_faint_gradient():
    weight = color_of(PositionTally(0, 0))
    assert weight.kind is ColorKind.GRADIENT
    assert weight.opacity == pytest.approx(0.1)


def test_solid_css_matches_web_client():
    weight = color_of(PositionTally(up=40, down=3))
    assert weight.css() == {"background-color": "rgba(0,255,0,0.4)"}
    assert weight.to_style() == "background-color: rgba(0,255,0,0.4)"


def test_gradient_css():
    weight = color_of(PositionTally(up=120, down=120))
    assert weight.css() == {
        "background-image": "linear-gradient(rgba(0,255,0,1), rgba(255,0,0,1))",
    }


def test_down_wins():
    weight = color_of(PositionTally(up=1, down=2))
    assert weight.kind is ColorKind.SOLID
    assert weight.colors == ((255, 0, 0),)
