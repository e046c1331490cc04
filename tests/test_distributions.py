"""
Tests for the discrete distributions and their maximization steps.
"""

import numpy as np
import pytest
import scipy.stats

from dmixem import Component
from dmixem.distribution import (
    PoissonDistribution,
    BinomialDistribution,
    GeometricDistribution,
    ShiftedGeometricDistribution,
    EmpiricalDistribution,
    is_exponential_family,
)


DATA = np.array([0, 0, 1, 1, 2, 5, 5, 6, 7, 20, 20, 21])


class TestPoisson:
    """Tests for PoissonDistribution."""

    def test_density_matches_scipy(self):
        d = PoissonDistribution(3.5)
        x = np.arange(20)
        np.testing.assert_allclose(d.density(x), scipy.stats.poisson.pmf(x, 3.5))

    def test_density_is_finite_and_non_negative(self):
        d = PoissonDistribution(15.0)
        p = d.density(DATA)
        assert np.all(np.isfinite(p))
        assert np.all(p >= 0)

    def test_moments(self):
        d = PoissonDistribution(4.0)
        assert d.mean() == 4.0
        assert d.variance() == 4.0
        assert d.sd() == pytest.approx(2.0)

    def test_maximize_unit_weights_gives_sample_mean(self):
        d = PoissonDistribution(1.0)
        c = d.maximize(DATA, np.ones(DATA.shape[0]))
        assert isinstance(c, Component)
        assert c.priori == pytest.approx(DATA.shape[0])
        assert c.distribution.lmbda == pytest.approx(np.mean(DATA))

    def test_maximize_weighted(self):
        d = PoissonDistribution(1.0)
        c = d.maximize(np.array([2, 10]), np.array([0.75, 0.25]))
        assert c.priori == pytest.approx(1.0)
        assert c.distribution.lmbda == pytest.approx(0.75 * 2 + 0.25 * 10)

    def test_maximize_does_not_modify_distribution(self):
        d = PoissonDistribution(1.0)
        d.maximize(DATA, np.ones(DATA.shape[0]))
        assert d.lmbda == 1.0

    def test_maximize_zero_weights_keeps_distribution(self):
        d = PoissonDistribution(3.0)
        c = d.maximize(DATA, np.zeros(DATA.shape[0]))
        assert c.priori == 0.0
        assert c.distribution is d

    @pytest.mark.parametrize("lmbda", [-1.0, float("nan")])
    def test_invalid_lambda(self, lmbda):
        with pytest.raises(ValueError):
            PoissonDistribution(lmbda)

    def test_rand_reproducible(self):
        d = PoissonDistribution(5.0)
        np.testing.assert_array_equal(d.rand(100, random_state=3), d.rand(100, random_state=3))

    def test_repr(self):
        assert repr(PoissonDistribution(2.5)) == "Poisson[λ=2.5]"


class TestBinomial:
    """Tests for BinomialDistribution."""

    def test_density_matches_scipy(self):
        d = BinomialDistribution(10, 0.3)
        x = np.arange(11)
        np.testing.assert_allclose(d.density(x), scipy.stats.binom.pmf(x, 10, 0.3))

    def test_density_outside_support(self):
        d = BinomialDistribution(3, 0.5)
        assert d.density(np.array([4]))[0] == 0.0

    def test_maximize(self):
        d = BinomialDistribution(10, 0.5)
        data = np.array([2, 4, 6])
        c = d.maximize(data, np.ones(3))
        assert c.priori == pytest.approx(3.0)
        assert c.distribution.n == 10
        assert c.distribution.p == pytest.approx(0.4)

    def test_moments(self):
        d = BinomialDistribution(20, 0.25)
        assert d.mean() == pytest.approx(5.0)
        assert d.variance() == pytest.approx(3.75)

    @pytest.mark.parametrize("n, p", [(-1, 0.5), (2.5, 0.5), (10, 1.5), (10, -0.1)])
    def test_invalid_parameters(self, n, p):
        with pytest.raises(ValueError):
            BinomialDistribution(n, p)


class TestGeometric:
    """Tests for the geometric distributions."""

    def test_density_starts_at_zero(self):
        d = GeometricDistribution(0.25)
        np.testing.assert_allclose(d.density(np.array([0, 1, 2])), [0.25, 0.1875, 0.140625])

    def test_shifted_density_starts_at_one(self):
        d = ShiftedGeometricDistribution(0.25)
        np.testing.assert_allclose(d.density(np.array([0, 1, 2])), [0.0, 0.25, 0.1875])

    def test_maximize(self):
        data = np.array([0, 1, 2, 5])
        c = GeometricDistribution(0.5).maximize(data, np.ones(4))
        assert c.distribution.p == pytest.approx(1 / (1 + np.mean(data)))

    def test_shifted_maximize(self):
        data = np.array([1, 2, 3, 6])
        c = ShiftedGeometricDistribution(0.5).maximize(data, np.ones(4))
        assert c.distribution.p == pytest.approx(1 / np.mean(data))

    def test_moments(self):
        assert GeometricDistribution(0.2).mean() == pytest.approx(4.0)
        assert ShiftedGeometricDistribution(0.2).mean() == pytest.approx(5.0)
        assert GeometricDistribution(0.2).variance() == pytest.approx(20.0)

    def test_rand_support(self):
        assert np.min(GeometricDistribution(0.9).rand(200, random_state=0)) == 0
        assert np.min(ShiftedGeometricDistribution(0.9).rand(200, random_state=0)) == 1

    @pytest.mark.parametrize("p", [0.0, 1.5, -0.5])
    def test_invalid_probability(self, p):
        with pytest.raises(ValueError):
            GeometricDistribution(p)


class TestEmpirical:
    """Tests for EmpiricalDistribution."""

    def test_density(self):
        d = EmpiricalDistribution([0.2, 0.3, 0.5])
        np.testing.assert_allclose(d.density(np.array([0, 1, 2, 3, -1])), [0.2, 0.3, 0.5, 0.0, 0.0])

    def test_cdf(self):
        d = EmpiricalDistribution([0.2, 0.3, 0.5])
        np.testing.assert_allclose(d.cdf(np.array([-1, 0, 1, 2, 7])), [0.0, 0.2, 0.5, 1.0, 1.0])

    def test_moments(self):
        d = EmpiricalDistribution([0.5, 0.0, 0.5])
        assert d.mean() == pytest.approx(1.0)
        assert d.variance() == pytest.approx(1.0)

    def test_n_parameters(self):
        assert EmpiricalDistribution([0.2, 0.3, 0.5]).n_parameters == 2

    def test_invalid_probabilities(self):
        with pytest.raises(ValueError):
            EmpiricalDistribution([0.5, 0.6])
        with pytest.raises(ValueError):
            EmpiricalDistribution([])


class TestCapability:
    """Tests for the exponential family capability check."""

    @pytest.mark.parametrize("d", [
        PoissonDistribution(1.0),
        BinomialDistribution(5, 0.5),
        GeometricDistribution(0.5),
        ShiftedGeometricDistribution(0.5),
    ])
    def test_exponential_family(self, d):
        assert is_exponential_family(d)

    def test_not_exponential_family(self):
        assert not is_exponential_family(EmpiricalDistribution([1.0]))
        assert not is_exponential_family(object())
