"""
Command-line demo.

    python -m scalar_aad.demo autodiff --x 2 --y 3 --z 5 --check --graph
    python -m scalar_aad.demo train --iterations 100000 --seed 0
"""

import argparse
import logging
import sys

import numpy as np

from scalar_aad.aad import ADVar, check_grads, format_graph_summary
from scalar_aad.perceptron import SingleLayerPerceptron, TrainerConfig

TRAIN_INPUTS = [[1, 0, 1], [1, 0, 0], [0, 1, 1]]
TRAIN_TARGETS = [1, 0, 1]
TEST_INPUTS = [[1, 1, 0], [1, 1, 1], [0, 0, 0]]


def example_function(v):
    """f = x/y - tan(x)cos(y) + e^x + sin(z)sin(x) + e^z / (sin(x) + xyz)"""
    x, y, z = v['x'], v['y'], v['z']
    return (x / y - x.tan() * y.cos() + x.exp() + z.sin() * x.sin()
            + z.exp() / (x.sin() + x * y * z))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Scalar reverse-mode AAD demo',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    sub = parser.add_subparsers(dest='command')

    ad = sub.add_parser('autodiff', help='Differentiate the example expression',
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    ad.add_argument('--x', type=float, default=2.0, help='Value of x')
    ad.add_argument('--y', type=float, default=3.0, help='Value of y')
    ad.add_argument('--z', type=float, default=5.0, help='Value of z')
    ad.add_argument('--check', action='store_true',
                    help='Compare against central differences')
    ad.add_argument('--graph', action='store_true',
                    help='Print a summary of the computation graph')

    tr = sub.add_parser('train', help='Train the single-layer perceptron on toy data',
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    tr.add_argument('--iterations', type=int, default=100000, help='Training iterations')
    tr.add_argument('--learning-rate', type=float, default=1.0, help='Update scale')
    tr.add_argument('--seed', type=int, default=None, help='Weight initialisation seed')
    tr.add_argument('--log-every', type=int, default=10, help='Loss logging interval')

    # no subcommand: run autodiff with its defaults
    parser.set_defaults(command='autodiff', x=2.0, y=3.0, z=5.0, check=False, graph=False)
    return parser.parse_args(argv)


def run_autodiff(args):
    inputs = {'x': args.x, 'y': args.y, 'z': args.z}
    v = {k: ADVar(val, name=k) for k, val in inputs.items()}
    f = example_function(v)
    f.backward()

    print(f"The value of f(x, y, z): {float(f.value):.10g}")
    for k in ('x', 'y', 'z'):
        print(f"The value of gradient with respect to {k}: {float(v[k].grad):.10g}")

    if args.check:
        _, numeric = check_grads(example_function, inputs)
        print("Gradient check passed (central differences):")
        for k, n in numeric.items():
            print(f"  d/d{k} ~ {n:.10g}")

    if args.graph:
        print(format_graph_summary(f, detailed=True))


def run_train(args):
    config = TrainerConfig(n_inputs=3, learning_rate=args.learning_rate,
                           iterations=args.iterations, log_every=args.log_every,
                           seed=args.seed)
    model = SingleLayerPerceptron(config)
    history = model.train(TRAIN_INPUTS, TRAIN_TARGETS)
    if history:
        print(f"Final logged loss: {history[-1]:.6g}")
    print(f"Weights: {np.array2string(model.weights, precision=6)}  Bias: {model.bias:.6f}")
    for row, p in zip(TEST_INPUTS, model.forward(TEST_INPUTS)):
        print(f"{row} -> {p:.6f}")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    if args.command == 'train':
        run_train(args)
    else:
        run_autodiff(args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
