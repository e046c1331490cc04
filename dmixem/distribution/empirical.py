# coding=utf-8
import numpy as np

from .distribution import DiscreteDistribution


class EmpiricalDistribution(DiscreteDistribution):
    """Arbitrary probability masses over x = 0, 1, ..., k-1. Not of the exponential family, so it cannot be fitted by EM."""

    def __init__(self, probabilities):
        probabilities = np.asarray(probabilities, dtype=float)

        if len(probabilities.shape) != 1 or probabilities.shape[0] == 0:
            raise ValueError("Expect a non-empty 1D vector of probabilities!")
        if np.any(probabilities < 0) or abs(np.sum(probabilities) - 1.0) > 1e-7:
            raise ValueError("Probabilities must be non-negative and sum to 1.")

        self.probabilities = probabilities
        self.n_parameters = probabilities.shape[0] - 1

    def log_density(self, data):
        data = np.asarray(data)
        assert(len(data.shape) <= 1), "Expect 1D data!"

        inside = (data >= 0) & (data < self.probabilities.shape[0])
        mass = np.zeros(data.shape)
        mass[inside] = self.probabilities[data[inside].astype(int)]

        with np.errstate(divide="ignore"):
            return np.log(mass)

    def cdf(self, x):
        cumulative = np.concatenate(([0.0], np.cumsum(self.probabilities)))
        index = np.clip(np.floor(np.asarray(x)).astype(int) + 1, 0, self.probabilities.shape[0])
        return cumulative[index]

    def mean(self):
        return float(np.sum(np.arange(self.probabilities.shape[0]) * self.probabilities))

    def variance(self):
        support = np.arange(self.probabilities.shape[0])
        return float(np.sum(support ** 2 * self.probabilities) - self.mean() ** 2)

    def rand(self, size=None, random_state=None):
        rng = np.random.default_rng(random_state)
        return rng.choice(self.probabilities.shape[0], size=size, p=self.probabilities)

    def __repr__(self):
        po = np.get_printoptions()

        np.set_printoptions(precision=3)

        try:
            result = "Empirical[p={p}]".format(p=self.probabilities)
        finally:
            np.set_printoptions(**po)

        return result
