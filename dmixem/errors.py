"""Errors raised before fitting starts. Numerical degeneracy during EM is never raised."""


class MixtureError(ValueError):
    """Base class for invalid mixture setups."""


class InvalidConfiguration(MixtureError):
    """A component cannot take part in the mixture (e.g. no maximization step for its family)."""


class TooManyComponents(MixtureError):
    """The sample is too small for the number of components."""


class InvalidRegularization(MixtureError):
    """The regularization factor gamma is outside [0, 0.2]."""
