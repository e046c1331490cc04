#!/usr/bin/env python

import numpy as np
import dmixem
from dmixem.distribution import BinomialDistribution


def generate_data():
    n_data = 2000
    labels = np.random.choice(2, size=n_data, p=[0.5, 0.5])
    p = np.where(labels == 0, 0.2, 0.75)

    return np.random.binomial(30, p)


def recover(data):

    components, ll = dmixem.em([
        (0.5, BinomialDistribution(30, 0.4)),
        (0.5, BinomialDistribution(30, 0.6)),
    ], data, gamma=0.1, progress_callback=dmixem.simple_progress)

    print(components, ll)


if __name__ == '__main__':
    data = generate_data()
    recover(data)
