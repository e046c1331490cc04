'''
   Usage:
      dmixem fit DATA -d poisson -i 1.0 15.0 [options]

      Try 'dmixem -h' for more information.

    Purpose: fits a mixture of discrete exponential family distributions
             to integer counts read from a text file with the EM algorithm.
'''
import sys, json, argparse
import logging
import numpy as np

from ._version import __version__
from .distribution import (PoissonDistribution, BinomialDistribution,
                           GeometricDistribution, ShiftedGeometricDistribution)
from .em import DEFAULT_GAMMA
from .errors import MixtureError
from .mixture import DiscreteExponentialFamilyMixture
from .progress import LogLikelihoodTrace

logger = logging.getLogger(__name__)

families = ['poisson', 'binomial', 'geometric', 'shifted_geometric']


def make_distribution(family, param, n_trials=None):
    if family == 'poisson':
        return PoissonDistribution(param)
    elif family == 'binomial':
        if n_trials is None:
            raise ValueError("-n/--trials is required for the binomial family.")
        return BinomialDistribution(n_trials, param)
    elif family == 'geometric':
        return GeometricDistribution(param)
    elif family == 'shifted_geometric':
        return ShiftedGeometricDistribution(param)
    else:
        raise ValueError("Unknown distribution family: %s" % family)


def read_data(path):
    src = sys.stdin if path == '-' else path
    data = np.loadtxt(src, dtype=int, ndmin=1)
    if data.shape[0] == 0:
        raise ValueError("No examples in %s" % path)
    return data


def setup_logging(log_path=None, verbose=False):
    ### logging conf ###
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    sh = logging.StreamHandler()

    formatter = logging.Formatter('%(module)s:%(asctime)s:%(lineno)d:%(levelname)s:%(message)s')
    sh.setFormatter(formatter)
    root.addHandler(sh)

    if log_path:
        fh = logging.FileHandler(log_path, 'w')
        fh.setFormatter(formatter)
        root.addHandler(fh)
    #####################


def summarize(mixture, data, trace):
    return {
        'weights': [c.priori for c in mixture.components],
        'components': [dict(repr=repr(c.distribution), **_params(c.distribution)) for c in mixture.components],
        'log_likelihood': mixture.log_likelihood_,
        'bic': mixture.bic(data),
        'iterations': trace.n_iterations,
        # rejected candidates with unnormalizable priori weights have no log-likelihood
        'trace': [ll if np.isfinite(ll) else None for ll in trace.log_likelihoods],
    }


def _params(distribution):
    if isinstance(distribution, PoissonDistribution):
        return {'lambda': distribution.lmbda}
    elif isinstance(distribution, BinomialDistribution):
        return {'n': distribution.n, 'p': distribution.p}
    else:
        return {'p': distribution.p}


def command_fit(args):
    setup_logging(args.log, args.verbose)
    logger.info("Cmd: %s" % " ".join(sys.argv))

    try:
        data = read_data(args.data)
        logger.info("Read %d examples from %s" % (data.shape[0], args.data))

        dists = [make_distribution(args.dist, p, args.trials) for p in args.init]
        if args.weights:
            if len(args.weights) != len(dists):
                raise ValueError("-w/--weights needs one weight per initial parameter.")
            weights = args.weights
        else:
            weights = [1.0 / len(dists)] * len(dists)

        trace = LogLikelihoodTrace()
        mixture = DiscreteExponentialFamilyMixture.fit(list(zip(weights, dists)), data, gamma=args.gamma,
                                                       max_iterations=args.max_iter, progress_callback=trace)
        result = json.dumps(summarize(mixture, data, trace), indent=4)
    except (MixtureError, ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    if args.out:
        with open(args.out, 'w') as f:
            f.write(result + "\n")
        logger.info("Result was written to %s" % args.out)
    else:
        print(result)

    return 0


def command_help(args):
    parser = build_parser()
    parser.parse_args([args.command, '--help'])


def build_parser():
    parser = argparse.ArgumentParser(prog='dmixem', description='EM fitting of discrete exponential family mixtures.')
    parser.add_argument('-v', '--version', action='version', version='%(prog)s ' + __version__)

    subparsers = parser.add_subparsers()

    parser_fit = subparsers.add_parser('fit', help='see `fit -h`')
    parser_fit.add_argument('data', type=str, help='a text file of whitespace separated integers (- for stdin)')
    parser_fit.add_argument('-d', '--dist', choices=families, help='the distribution family of every component. ['+", ".join(families)+']',
                            metavar='dist', dest='dist', required=True)
    parser_fit.add_argument('-i', '--init', type=float, nargs='+', required=True, dest='init',
                            help='initial parameter of each component (lambda for poisson, p otherwise).')
    parser_fit.add_argument('-w', '--weights', type=float, nargs='+', dest='weights', default=None,
                            help='initial priori weights. [Default is uniform]')
    parser_fit.add_argument('-n', '--trials', type=int, dest='trials', default=None,
                            help='number of trials of binomial components.')
    parser_fit.add_argument('-g', '--gamma', type=float, dest='gamma', default=DEFAULT_GAMMA,
                            help='regularization factor in [0, 0.2]. 0 is the standard EM. [Default is %.1f]' % DEFAULT_GAMMA)
    parser_fit.add_argument('-m', '--max_iter', type=int, dest='max_iter', default=0,
                            help='maximum number of iterations. <= 0 iterates until convergence. [Default is 0]')
    parser_fit.add_argument('-o', '--output', type=str, dest='out', default=None,
                            help='path of the output json. [Default is stdout]')
    parser_fit.add_argument('-l', '--log', type=str, dest='log', default=None,
                            help='path of a log file.')
    parser_fit.add_argument('--verbose', action='store_true', dest='verbose', default=False,
                            help='log debug messages too.')
    parser_fit.set_defaults(handler=command_fit)

    # help
    parser_help = subparsers.add_parser('help', help='see `help -h`')
    parser_help.add_argument('command', help='')
    parser_help.set_defaults(handler=command_help)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, 'handler'):
        return args.handler(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
