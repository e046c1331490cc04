# coding=utf-8
from logging import getLogger
logger = getLogger(__name__)


def format_mixture(weights, distributions):
    """Render a mixture as p(x|Φ) = w1*D1 + w2*D2 + ..."""
    return "p(x|Φ) = " + " + ".join("{w:.3g}*{d}".format(w=w, d=d) for w, d in zip(weights, distributions))


def simple_progress(iteration, weights, distributions, log_likelihood):
    """A simple progress callback to use with dmixem.em that prints every candidate mixture"""

    print("iteration {iteration:4d} (log-likelihood={log_likelihood:.5e}): {mixture}".format(
        iteration=iteration, log_likelihood=log_likelihood, mixture=format_mixture(weights, distributions)))


def logged_simple_progress(iteration, weights, distributions, log_likelihood):
    """The default progress callback of dmixem.em. Candidates are logged at DEBUG, their log-likelihood at INFO."""

    logger.info("iteration %4d: candidate log-likelihood=%.5e" % (iteration, log_likelihood))
    logger.debug("iteration %4d: %s" % (iteration, format_mixture(weights, distributions)))


class LogLikelihoodTrace(object):
    """Progress callback recording the log-likelihood of every candidate mixture.

    EM stops at the first candidate that does not improve, so when fitting converged the last
    entry is the rejected candidate and all earlier ones were accepted.

    :param forward: Another progress callback to pass every call on to, or None.
    """

    def __init__(self, forward=logged_simple_progress):
        self.forward = forward
        self.log_likelihoods = []

    def __call__(self, iteration, weights, distributions, log_likelihood):
        self.log_likelihoods.append(log_likelihood)
        if self.forward:
            self.forward(iteration, weights, distributions, log_likelihood)

    @property
    def n_iterations(self):
        return len(self.log_likelihoods)

