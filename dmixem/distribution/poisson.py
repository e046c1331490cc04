# coding=utf-8
import numpy as np
import scipy.stats

from ..component import Component
from .distribution import DiscreteExponentialFamily, weighted_sums


class PoissonDistribution(DiscreteExponentialFamily):
    """Poisson distribution with parameter (lambda)."""

    n_parameters = 1

    def __init__(self, lmbda):
        if not lmbda >= 0:
            raise ValueError("Invalid lambda: %s" % lmbda)
        self.lmbda = lmbda

    def log_density(self, data):
        data = np.asarray(data)
        assert(len(data.shape) <= 1), "Expect 1D data!"
        return scipy.stats.poisson.logpmf(data, self.lmbda)

    def cdf(self, x):
        return scipy.stats.poisson.cdf(x, self.lmbda)

    def mean(self):
        return self.lmbda

    def variance(self):
        return self.lmbda

    def rand(self, size=None, random_state=None):
        return np.random.default_rng(random_state).poisson(self.lmbda, size=size)

    def maximize(self, data, weights):
        alpha, total = weighted_sums(data, weights)
        if not alpha > 0:
            return Component(0.0, self)

        return Component(alpha, PoissonDistribution(total / alpha))

    def __repr__(self):
        return "Poisson[λ={lmbda:.4g}]".format(lmbda=self.lmbda)
