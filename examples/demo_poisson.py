#!/usr/bin/env python

import dmixem
from dmixem.distribution import PoissonDistribution


def generate_data():
    mixture = dmixem.DiscreteMixture([
        (0.3, PoissonDistribution(2.0)),
        (0.7, PoissonDistribution(20.0)),
    ])

    return mixture.rand(5000, random_state=1)


def recover(data):

    mixture = dmixem.DiscreteExponentialFamilyMixture.fit([
        (0.5, PoissonDistribution(1.0)),
        (0.5, PoissonDistribution(10.0)),
    ], data, gamma=0.0, progress_callback=dmixem.simple_progress)

    print(mixture, mixture.log_likelihood_, mixture.bic(data))


if __name__ == '__main__':
    data = generate_data()
    recover(data)
