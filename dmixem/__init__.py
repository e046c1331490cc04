"""
Expectation-Maximization fitting of mixtures of discrete exponential family distributions.
"""


from . import distribution
from .progress import simple_progress, logged_simple_progress, LogLikelihoodTrace
from .component import Component
from .em import em
from .model import probability, log_likelihood
from .mixture import DiscreteMixture, DiscreteExponentialFamilyMixture
from .errors import MixtureError, InvalidConfiguration, TooManyComponents, InvalidRegularization
from ._version import __version__
