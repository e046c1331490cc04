import abc

import numpy as np


class DiscreteDistribution(metaclass=abc.ABCMeta):
    """
    Base class for a dmixem probability distribution over integers.

    To define your own new distribution, implement :meth:`log_density`, :meth:`cdf`,
    :meth:`mean`, :meth:`variance`, :meth:`rand` and :meth:`__repr__`, and set
    :attr:`n_parameters`.
    """

    #: number of free parameters of the distribution
    n_parameters = 0

    @abc.abstractmethod
    def log_density(self, data):
        """Compute the log-probability mass :math:`\\log P(x|\\phi)`

        :param data: The integer data :math:`x` to compute a probability mass for. A 1-D :class:`numpy.ndarray` of N examples.
        :type data: numpy.ndarray

        :returns: The log-probability for observing each example, given the distribution's parameters
        :rtype: numpy.ndarray
        """
        raise NotImplementedError("Need to implement density calculation!")

    def density(self, data):
        """Compute the probability mass :math:`P(x|\\phi)`. Finite and non-negative for valid parameters."""
        return np.exp(self.log_density(np.asarray(data)))

    @abc.abstractmethod
    def cdf(self, x):
        """Cumulative distribution function :math:`P(X \\leq x|\\phi)`"""
        raise NotImplementedError("Need to implement cdf!")

    @abc.abstractmethod
    def mean(self):
        raise NotImplementedError("Need to implement mean!")

    @abc.abstractmethod
    def variance(self):
        raise NotImplementedError("Need to implement variance!")

    def sd(self):
        return np.sqrt(self.variance())

    @abc.abstractmethod
    def rand(self, size=None, random_state=None):
        """Draw random integers from the distribution.

        :param size: Output shape, as for :mod:`numpy.random`. None draws a single value.
        :param random_state: Seed or :class:`numpy.random.Generator`.
        """
        raise NotImplementedError("Need to implement sampling!")

    @abc.abstractmethod
    def __repr__(self):
        """Create a string representation of the probability distribution"""
        raise NotImplementedError("Need to implement string representation!")


class DiscreteExponentialFamily(DiscreteDistribution):
    """
    Discrete distribution of the exponential family, i.e. one that admits a closed-form
    weighted maximum-likelihood update. Only these can be fitted by :func:`dmixem.em`.
    """

    @abc.abstractmethod
    def maximize(self, data, weights):
        """Estimate the distribution's parameters using weighted maximum-likelihood estimation.

        :param data: The integer data :math:`x` to estimate parameters for. A 1-D :class:`numpy.ndarray` of N examples.
        :type data: numpy.ndarray

        :param weights: The weights :math:`\\gamma` (responsibilities) for individual data points. A N-element :class:`numpy.ndarray`.
        :type weights: numpy.ndarray

        Choose those parameters :math:`\\phi` that maximize the weighted log-likelihood function:

        .. math::
            ll_\\gamma(x|\\phi) = \\sum_{n=1}^N \\gamma_{n} \\log [P(x|\\phi)]

        The distribution is not modified. A new one carrying the estimates is returned together with
        the unnormalized priori weight :math:`\\sum_n \\gamma_n`. If the weights sum to zero the
        current distribution is returned with priori 0.

        :rtype: :class:`dmixem.component.Component`
        """
        raise NotImplementedError("Need to implement parameter estimation!")


def is_exponential_family(distribution):
    """Whether the distribution supports the maximization step used by EM."""
    return callable(getattr(distribution, "maximize", None))


def weighted_sums(data, weights):
    """Return (sum of weights, weighted sum of data) as floats."""
    data = np.asarray(data, dtype=float)
    weights = np.asarray(weights, dtype=float)
    assert data.shape == weights.shape, "Need one weight per example!"
    return float(np.sum(weights)), float(np.sum(weights * data))
