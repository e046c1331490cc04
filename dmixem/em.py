from logging import getLogger

import numpy as np

from .component import Component, as_component
from .distribution import is_exponential_family
from .errors import InvalidConfiguration, TooManyComponents, InvalidRegularization
from .model import weighted_densities, log_likelihood
from .progress import logged_simple_progress

logger = getLogger(__name__)

DEFAULT_GAMMA = 0.2
MAX_GAMMA = 0.2


def require_exponential_family(components):
    """Raise :class:`InvalidConfiguration` unless every component can be fitted by EM."""
    for component in components:
        if not is_exponential_family(component.distribution):
            raise InvalidConfiguration("Component %r is not of discrete exponential family." % (component,))


def check_components(components):
    """Return components as a tuple of :class:`Component`, or raise :class:`InvalidConfiguration`."""

    checked = tuple(as_component(c) for c in components)
    if not checked:
        raise InvalidConfiguration("Need at least one component!")

    require_exponential_family(checked)
    return checked


def expectation(components, data):
    """E-step: the (components x samples) matrix of responsibilities.

    Each column is normalized by the marginal likelihood of its example. Examples with zero
    marginal likelihood get zero responsibility from every component instead of NaN.
    """
    posteriori = weighted_densities(components, data)
    marginal = np.sum(posteriori, axis=0)

    possible = marginal > 0
    posteriori[:, possible] /= marginal[np.newaxis, possible]
    posteriori[:, ~possible] = 0.0

    return posteriori


def regularize(posteriori, gamma):
    """Regularized EM adjustment r * (1 + gamma * log2(r)), with NaN or negative results set to 0.

    Columns are not renormalized afterwards.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        adjusted = posteriori * (1 + gamma * np.log2(posteriori))

    # also catches nan
    adjusted[~(adjusted >= 0.0)] = 0.0
    return adjusted


def maximization(components, data, posteriori):
    """M-step: one weighted maximum-likelihood update per component, priori weights renormalized to 1."""

    updated = [c.distribution.maximize(data, posteriori[i]) for i, c in enumerate(components)]

    weight = np.array([c.priori for c in updated], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        weight /= np.sum(weight)

    return tuple(Component(float(w), c.distribution) for w, c in zip(weight, updated))


def em(components, data, gamma=DEFAULT_GAMMA, max_iterations=None, progress_callback=logged_simple_progress):
    """Fit a mixture of discrete exponential family distributions using the (regularized) Expectation-Maximization (EM) algorithm.

    Every iteration builds a candidate mixture. It is accepted only if it strictly increases the
    log-likelihood; otherwise fitting stops and the candidate is discarded, so the result is never
    worse than the initial guess.

    :param components: The initial guess, a sequence of (priori, distribution) pairs. Priori weights should sum to 1.
    :type components: list of :class:`dmixem.component.Component`

    :param data: The integer data to fit the mixture to. Can be an array-like or a :class:`numpy.ndarray`
    :type data: numpy.ndarray

    :param gamma: The regularization factor in [0, 0.2]. 0 gives the standard EM algorithm.
    :type gamma: float

    :param max_iterations: The maximum number of iterations to compute for. None or <= 0 iterates until convergence.
    :type max_iterations: int or None

    :param progress_callback: A function to call to report progress after every iteration.
    :type progress_callback: function or None

    :rtype: tuple (components, log_likelihood)
    """

    components = check_components(components)
    data = np.asarray(data)

    n_distr = len(components)
    n_data = data.shape[0]

    if n_data < n_distr // 2:
        raise TooManyComponents("Too many components: %d for %d examples." % (n_distr, n_data))

    if not 0.0 <= gamma <= MAX_GAMMA:
        raise InvalidRegularization("Invalid regularization factor gamma: %s" % gamma)

    if max_iterations is None or max_iterations <= 0:
        max_iterations = np.inf

    ll = log_likelihood(data, components)
    logger.debug("EM started with %d components on %d examples, initial log-likelihood %.5e" % (n_distr, n_data, ll))

    iteration = 0
    while iteration < max_iterations:
        # E-step #######
        posteriori = expectation(components, data)

        if gamma > 0:
            posteriori = regularize(posteriori, gamma)

        # M-step #######
        candidate = maximization(components, data, posteriori)
        new_ll = log_likelihood(data, candidate)

        if progress_callback:
            progress_callback(iteration, [c.priori for c in candidate], [c.distribution for c in candidate], new_ll)

        # Convergence check #######
        if not new_ll > ll:
            logger.info("EM converged after %d iterations (log-likelihood=%.5e)" % (iteration, ll))
            break

        ll = new_ll
        components = candidate
        iteration += 1
    else:
        logger.info("EM stopped at the iteration limit %d (log-likelihood=%.5e)" % (iteration, ll))

    return components, ll
