import numpy as np


def _split(components):
    weights = np.array([c[0] for c in components], dtype=float)
    distributions = [c[1] for c in components]
    return weights, distributions


def weighted_densities(components, data):
    """Compute the (components x samples) matrix of priori * density for every component and example"""

    weights, distributions = _split(components)
    data = np.asarray(data)

    densities = np.empty((len(distributions), data.shape[0]))
    for d in range(len(distributions)):
        densities[d, :] = distributions[d].density(data)

    return weights[:, np.newaxis] * densities


def probability(data, components):
    """Compute the probability for data of the mixture model given by a sequence of (priori, distribution) components"""

    if not hasattr(data, '__len__'):
        data = [data]

    return np.sum(weighted_densities(components, np.array(data)), axis=0)


def log_likelihood(data, components):
    """Log-likelihood of data under a mixture. Examples the mixture considers impossible contribute nothing."""

    p = probability(data, components)
    if np.any(np.isnan(p)):
        # priori weights that could not be normalized
        return np.nan

    possible = p > 0
    return float(np.sum(np.log(p[possible])))
