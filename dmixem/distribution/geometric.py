# coding=utf-8
import numpy as np
import scipy.stats

from ..component import Component
from .distribution import DiscreteExponentialFamily, weighted_sums


def _check_probability(p):
    if not 0.0 < p <= 1.0:
        raise ValueError("Invalid probability of success: %s" % p)


class GeometricDistribution(DiscreteExponentialFamily):
    """Geometric distribution with parameter (p): number of failures before the first success, x = 0, 1, 2, ..."""

    n_parameters = 1

    def __init__(self, p):
        _check_probability(p)
        self.p = p

    def log_density(self, data):
        data = np.asarray(data)
        assert(len(data.shape) <= 1), "Expect 1D data!"
        return scipy.stats.geom.logpmf(data, self.p, loc=-1)

    def cdf(self, x):
        return scipy.stats.geom.cdf(x, self.p, loc=-1)

    def mean(self):
        return (1 - self.p) / self.p

    def variance(self):
        return (1 - self.p) / self.p ** 2

    def rand(self, size=None, random_state=None):
        return np.random.default_rng(random_state).geometric(self.p, size=size) - 1

    def maximize(self, data, weights):
        alpha, total = weighted_sums(data, weights)
        if not alpha > 0:
            return Component(0.0, self)

        return Component(alpha, GeometricDistribution(alpha / (alpha + total)))

    def __repr__(self):
        return "Geom[p={p:.4g}]".format(p=self.p)


class ShiftedGeometricDistribution(DiscreteExponentialFamily):
    """Geometric distribution with parameter (p): number of trials up to and including the first success, x = 1, 2, 3, ..."""

    n_parameters = 1

    def __init__(self, p):
        _check_probability(p)
        self.p = p

    def log_density(self, data):
        data = np.asarray(data)
        assert(len(data.shape) <= 1), "Expect 1D data!"
        return scipy.stats.geom.logpmf(data, self.p)

    def cdf(self, x):
        return scipy.stats.geom.cdf(x, self.p)

    def mean(self):
        return 1 / self.p

    def variance(self):
        return (1 - self.p) / self.p ** 2

    def rand(self, size=None, random_state=None):
        return np.random.default_rng(random_state).geometric(self.p, size=size)

    def maximize(self, data, weights):
        alpha, total = weighted_sums(data, weights)
        if not alpha > 0:
            return Component(0.0, self)

        # zeros are outside the support; they can push the estimate above 1
        p = min(alpha / total, 1.0) if total > 0 else 1.0
        return Component(alpha, ShiftedGeometricDistribution(p))

    def __repr__(self):
        return "ShiftedGeom[p={p:.4g}]".format(p=self.p)
