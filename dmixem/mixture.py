"""
Finite mixtures of discrete distributions.

A mixture is an immutable tuple of :class:`Component` (priori, distribution) pairs whose priori
weights sum to one. :class:`DiscreteExponentialFamilyMixture` can additionally be learned from
data with the EM algorithm.
"""

from logging import getLogger

import numpy as np

from .component import Component, as_component
from .em import em, expectation, require_exponential_family, DEFAULT_GAMMA
from .errors import InvalidConfiguration
from .model import probability, log_likelihood
from .progress import logged_simple_progress

logger = getLogger(__name__)

PRIORI_TOLERANCE = 1e-3


class DiscreteMixture(object):
    """Finite mixture of discrete distributions."""

    def __init__(self, components):
        checked = []
        for component in components:
            priori, distribution = as_component(component)

            if not callable(getattr(distribution, "log_density", None)):
                raise InvalidConfiguration("Component %r is not a discrete distribution." % (component,))
            if not priori >= 0:
                raise InvalidConfiguration("Component %r has an invalid priori weight." % (component,))

            checked.append(Component(float(priori), distribution))

        if not checked:
            raise InvalidConfiguration("Need at least one component!")

        if abs(sum(c.priori for c in checked) - 1.0) > PRIORI_TOLERANCE:
            raise InvalidConfiguration("The sum of priori weights is not equal to 1.")

        self._components = tuple(checked)

    @property
    def components(self):
        return self._components

    @property
    def weights(self):
        return np.array([c.priori for c in self._components])

    @property
    def size(self):
        """Number of components"""
        return len(self._components)

    @property
    def n_parameters(self):
        """Number of free parameters: those of every component plus size - 1 priori weights"""
        return sum(c.distribution.n_parameters for c in self._components) + self.size - 1

    def density(self, x):
        """Probability mass of the mixture at x (scalar or 1-D array)"""
        p = probability(x, self._components)
        return p if np.ndim(x) else float(p[0])

    def log_density(self, x):
        with np.errstate(divide="ignore"):
            return np.log(self.density(x))

    def cdf(self, x):
        return sum(c.priori * c.distribution.cdf(x) for c in self._components)

    def mean(self):
        return sum(c.priori * c.distribution.mean() for c in self._components)

    def variance(self):
        # law of total variance
        second_moment = sum(c.priori * (c.distribution.variance() + c.distribution.mean() ** 2) for c in self._components)
        return second_moment - self.mean() ** 2

    def sd(self):
        return np.sqrt(self.variance())

    def posteriori(self, data):
        """(components x samples) matrix of the probability that each component generated each example"""
        return expectation(self._components, np.atleast_1d(data))

    def predict(self, data):
        """Index of the component with maximum a posteriori probability for each example"""
        return np.argmax(self.posteriori(data), axis=0)

    def rand(self, size=None, random_state=None):
        """Draw random integers: pick a component by its priori weight, then sample from it."""
        rng = np.random.default_rng(random_state)

        n = 1 if size is None else int(np.prod(size))
        weights = self.weights / np.sum(self.weights)
        labels = rng.choice(self.size, size=n, p=weights)

        samples = np.empty(n, dtype=int)
        for i, c in enumerate(self._components):
            chosen = labels == i
            samples[chosen] = c.distribution.rand(size=int(np.sum(chosen)), random_state=rng)

        return int(samples[0]) if size is None else samples.reshape(size)

    def log_likelihood(self, data):
        return log_likelihood(data, self._components)

    def bic(self, data):
        """Bayesian information criterion of the mixture on data; larger is better."""
        n = np.asarray(data).shape[0]
        if n == 0:
            raise ValueError("Need at least one example to compute the BIC.")
        return self.log_likelihood(data) - 0.5 * self.n_parameters * np.log(n)

    def __repr__(self):
        return "Mixture[{}]".format(" + ".join("{w:.3g}*{d}".format(w=c.priori, d=c.distribution) for c in self._components))

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self._components)


class DiscreteExponentialFamilyMixture(DiscreteMixture):
    """Finite mixture of discrete exponential family distributions, learnable from data with EM.

    :param components: (priori, distribution) pairs. Every distribution must implement ``maximize``.
    :raises InvalidConfiguration: if a component is not of discrete exponential family
    """

    def __init__(self, components):
        super(DiscreteExponentialFamilyMixture, self).__init__(components)
        require_exponential_family(self.components)

        #: log-likelihood reached by :meth:`fit`, None when constructed directly
        self.log_likelihood_ = None

    @classmethod
    def fit(cls, components, data, gamma=DEFAULT_GAMMA, max_iterations=None, progress_callback=logged_simple_progress):
        """Learn the mixture from data with the EM algorithm, starting from the components as initial guess.

        See :func:`dmixem.em` for the parameters.
        """
        initial = cls(components)

        fitted, ll = em(initial.components, data, gamma=gamma, max_iterations=max_iterations,
                        progress_callback=progress_callback)

        mixture = cls(fitted)
        mixture.log_likelihood_ = ll
        logger.info("Fitted %r" % (mixture,))

        return mixture
