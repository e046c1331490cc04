from .distribution import DiscreteDistribution, DiscreteExponentialFamily, is_exponential_family
from .poisson import PoissonDistribution
from .binomial import BinomialDistribution
from .geometric import GeometricDistribution, ShiftedGeometricDistribution

from .empirical import EmpiricalDistribution
