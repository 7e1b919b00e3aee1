import math

import pytest

from numlab.functions import Function, Parabola, Sign, TanEquation, XSinX


def test_function_is_abstract():
    with pytest.raises(TypeError):
        Function()


def test_xsinx_at_zero_and_half_pi():
    f = XSinX()
    assert f.eval(0.0) == 0.0
    assert f.eval(math.pi / 2) == pytest.approx(math.pi / 2)


def test_call_matches_eval():
    f = XSinX()
    for x in (-2.0, 0.3, 1.7, 10.0):
        assert f(x) == f.eval(x)


def test_xsinx_is_even():
    f = XSinX()
    for x in (0.5, 1.2, 3.3):
        assert f(-x) == pytest.approx(f(x))


def test_parabola_default_is_zero():
    p = Parabola()
    assert p(5.0) == 0.0
    assert p(-3.0) == 0.0


def test_parabola_constant_term():
    p = Parabola(2.0, 3.0, 7.0)
    assert p(0.0) == 7.0


def test_parabola_vertex_is_minimum_for_positive_a():
    p = Parabola(2.0, -3.0, 1.0)
    v = p.vertex()
    for d in (0.1, 0.5, 2.0):
        assert p(v) < p(v + d)
        assert p(v) < p(v - d)


def test_parabola_symmetric_about_vertex():
    p = Parabola(-1.5, 4.0, 2.0)
    v = p.vertex()
    assert p(v + 1.3) == pytest.approx(p(v - 1.3))


def test_parabola_vertex_without_quadratic_term():
    with pytest.raises(ZeroDivisionError):
        Parabola(0.0, 1.0, 1.0).vertex()


@pytest.mark.parametrize(
    "x, expected", [(-4.2, -1.0), (0.0, 0.0), (3.1, 1.0), (1e-300, 1.0)]
)
def test_sign(x, expected):
    assert Sign()(x) == expected


def test_tan_equation_is_odd():
    f = TanEquation()
    for x in (0.7, 2.5, 4.0):
        assert f(-x) == pytest.approx(-f(x))


def test_tan_equation_at_zero_and_pi():
    f = TanEquation()
    assert f(0.0) == 0.0
    assert f(math.pi) == pytest.approx(math.pi)


def test_tan_equation_changes_sign_between_pi_and_three_halves_pi():
    f = TanEquation()
    assert f(math.pi) * f(1.49 * math.pi) < 0
    assert f.prec == 1e-6