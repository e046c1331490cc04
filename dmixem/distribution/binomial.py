# coding=utf-8
import numpy as np
import scipy.stats

from ..component import Component
from .distribution import DiscreteExponentialFamily, weighted_sums


class BinomialDistribution(DiscreteExponentialFamily):
    """Binomial distribution with parameters (n, p). The number of trials n stays fixed during fitting."""

    n_parameters = 1

    def __init__(self, n, p):
        if int(n) != n or n < 0:
            raise ValueError("Invalid number of trials: %s" % n)
        if not 0.0 <= p <= 1.0:
            raise ValueError("Invalid probability of success: %s" % p)
        self.n = int(n)
        self.p = p

    def log_density(self, data):
        data = np.asarray(data)
        assert(len(data.shape) <= 1), "Expect 1D data!"
        return scipy.stats.binom.logpmf(data, self.n, self.p)

    def cdf(self, x):
        return scipy.stats.binom.cdf(x, self.n, self.p)

    def mean(self):
        return self.n * self.p

    def variance(self):
        return self.n * self.p * (1 - self.p)

    def rand(self, size=None, random_state=None):
        return np.random.default_rng(random_state).binomial(self.n, self.p, size=size)

    def maximize(self, data, weights):
        alpha, total = weighted_sums(data, weights)
        if not alpha > 0:
            return Component(0.0, self)
        if self.n == 0:
            return Component(alpha, self)

        p = min(total / (self.n * alpha), 1.0)
        return Component(alpha, BinomialDistribution(self.n, p))

    def __repr__(self):
        return "Binom[n={n:d}, p={p:.4g}]".format(n=self.n, p=self.p)
