#!/usr/bin/env python

import numpy as np
import dmixem
from dmixem.distribution import GeometricDistribution


def generate_data():
    dist_params = [0.1, 0.6]
    weights = [0.4, 0.6]

    n_data = 10000
    data = np.zeros((n_data), dtype=int)
    for i in range(n_data):
        dpi = np.random.choice(range(len(dist_params)), p=weights)
        dp = dist_params[dpi]
        # failures before the first success
        data[i] = np.random.geometric(p=dp) - 1

    return data


def recover(data):

    components, ll = dmixem.em([
        (0.5, GeometricDistribution(0.8)),
        (0.5, GeometricDistribution(0.05)),
    ], data, progress_callback=dmixem.simple_progress)

    print(components, ll)


if __name__ == '__main__':
    data = generate_data()
    recover(data)
