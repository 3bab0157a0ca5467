"""
Тесты для модуля Hyperbolic

Проверяемые инварианты:
1. Базовые формы совпадают со стандартной библиотекой в области определения
2. Выход за область определения → NaN / ±Inf, без исключений
3. Реципрокные формы = базовая форма от 1/x, включая x = 0
4. sech конечен везде, csch/coth → ±Inf в нуле
"""

import math

import pytest

from src.core.math.hyperbolic import (
    acosh,
    acoth,
    acsch,
    asech,
    asinh,
    atanh,
    coth,
    csch,
    sech,
)


# =============================================================================
# ТЕСТЫ: Базовые формы
# =============================================================================


class TestAsinh:
    """Тесты asinh: определён для всех вещественных x."""

    def test_zero(self):
        assert asinh(0.0) == 0.0

    def test_matches_stdlib(self):
        for x in [0.5, 1.0, 2.0, 10.0, -0.5, -3.0]:
            assert asinh(x) == pytest.approx(math.asinh(x))

    def test_odd_function(self):
        assert asinh(-2.0) == pytest.approx(-asinh(2.0))

    def test_positive_inf(self):
        assert asinh(math.inf) == math.inf


class TestAcosh:
    """Тесты acosh: вещественный только для x ≥ 1."""

    def test_one_is_zero(self):
        assert acosh(1.0) == 0.0

    def test_matches_stdlib(self):
        for x in [1.5, 2.0, 10.0, 1e6]:
            assert acosh(x) == pytest.approx(math.acosh(x))

    def test_below_one_is_nan(self):
        """Отрицательный аргумент корня → NaN, не ValueError."""
        assert math.isnan(acosh(0.5))
        assert math.isnan(acosh(0.0))

    def test_negative_is_nan(self):
        """x ≤ -1: корень определён, но аргумент логарифма отрицателен."""
        assert math.isnan(acosh(-2.0))


class TestAtanh:
    """Тесты atanh: |x| < 1, ±Inf на границах, NaN снаружи."""

    def test_zero(self):
        assert atanh(0.0) == 0.0

    def test_matches_stdlib(self):
        for x in [0.5, -0.5, 0.9, -0.999]:
            assert atanh(x) == pytest.approx(math.atanh(x))

    def test_one_is_positive_inf(self):
        assert atanh(1.0) == math.inf

    def test_minus_one_is_negative_inf(self):
        assert atanh(-1.0) == -math.inf

    def test_outside_domain_is_nan(self):
        assert math.isnan(atanh(2.0))
        assert math.isnan(atanh(-2.0))


# =============================================================================
# ТЕСТЫ: Реципрокные формы
# =============================================================================


class TestReciprocalForms:
    """acoth/asech/acsch вычисляются подстановкой 1/x."""

    def test_acoth_is_atanh_of_reciprocal(self):
        assert acoth(2.0) == pytest.approx(atanh(0.5))
        assert acoth(-4.0) == pytest.approx(atanh(-0.25))

    def test_asech_is_acosh_of_reciprocal(self):
        assert asech(0.5) == pytest.approx(acosh(2.0))
        assert asech(1.0) == 0.0

    def test_acsch_is_asinh_of_reciprocal(self):
        assert acsch(1.0) == pytest.approx(asinh(1.0))
        assert acsch(0.25) == pytest.approx(math.asinh(4.0))

    def test_acoth_inside_unit_interval_is_nan(self):
        assert math.isnan(acoth(0.5))

    def test_asech_above_one_is_nan(self):
        assert math.isnan(asech(2.0))

    def test_zero_propagates_infinity(self):
        """1/0 = Inf проходит через базовую формулу, исключений нет."""
        assert math.isnan(acoth(0.0))
        assert asech(0.0) == math.inf
        assert acsch(0.0) == math.inf


# =============================================================================
# ТЕСТЫ: sech / csch / coth
# =============================================================================


class TestReciprocalFunctions:
    """Тесты sech, csch, coth."""

    def test_sech_at_zero(self):
        assert sech(0.0) == 1.0

    def test_sech_matches_definition(self):
        assert sech(1.5) == pytest.approx(1.0 / math.cosh(1.5))

    def test_sech_finite_for_huge_arguments(self):
        """cosh переполняется, но sech → 0, а не OverflowError."""
        assert sech(1000.0) == 0.0
        assert sech(-1000.0) == 0.0

    def test_csch_at_zero_is_inf(self):
        assert csch(0.0) == math.inf
        assert csch(-0.0) == -math.inf

    def test_csch_matches_definition(self):
        assert csch(2.0) == pytest.approx(1.0 / math.sinh(2.0))

    def test_coth_at_zero_is_inf(self):
        assert coth(0.0) == math.inf

    def test_coth_matches_definition(self):
        assert coth(1.0) == pytest.approx(math.cosh(1.0) / math.sinh(1.0))
        assert coth(-1.0) == pytest.approx(-coth(1.0))


# =============================================================================
# ТЕСТЫ: Никаких исключений
# =============================================================================


class TestNeverRaises:
    """Ни одна функция не бросает исключений на любом float."""

    FUNCTIONS = [asinh, acosh, atanh, acoth, asech, acsch, sech, csch, coth]
    VALUES = [0.0, -0.0, 1.0, -1.0, 0.5, -0.5, 2.0, 1e308, -1e308, math.inf, -math.inf, math.nan]

    def test_all_values(self):
        for func in self.FUNCTIONS:
            for x in self.VALUES:
                result = func(x)
                assert isinstance(result, float)

    def test_nan_propagates(self):
        for func in self.FUNCTIONS:
            assert math.isnan(func(math.nan))
