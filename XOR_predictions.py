import argparse
import numpy as np

from seqnet import (
    SeqNet,
    Dense,
    Bias,
    Activation,
    ReLU,
    Sigmoid,
    SGDOptimizer,
    MomentumOptimizer,
    RMSPropOptimizer,
)
from seqnet.helpers.Backend import backend

XOR_INPUTS = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
XOR_OUTPUTS = np.array([[0], [1], [1], [0]], dtype=np.float64)


def build_net(n_hidden, rng):
    return SeqNet([
        Dense.random(2, n_hidden, -0.1, 0.1, rng=rng),
        Bias.random(n_hidden, 0.0, 0.6, rng=rng),
        Activation(n_hidden, ReLU()),
        Dense.random(n_hidden, 1, 0.0, 0.6, rng=rng),
        Bias.random(1, 0.0, 0.6, rng=rng),
        Activation(1, Sigmoid()),
    ])


def build_optimizer(args, net):
    if args.optimizer == "sgd":
        return SGDOptimizer(net, lr=args.lr)
    if args.optimizer == "momentum":
        return MomentumOptimizer(net, lr=args.lr, momentum=args.momentum)
    return RMSPropOptimizer(net, lr=args.lr, beta=args.beta)


def show(net):
    for x in XOR_INPUTS:
        print("in: ", x.tolist())
        print("out:", backend.to_cpu(net.feed_forward(x)).tolist())


def main():
    parser = argparse.ArgumentParser(description="Train a small SeqNet on XOR")
    parser.add_argument("--optimizer", type=str, default="rmsprop", choices=["sgd", "momentum", "rmsprop"])
    parser.add_argument("--iterations", type=int, default=1_000_000)
    parser.add_argument("--lr", type=float, default=1e-3)
    parser.add_argument("--momentum", type=float, default=0.9)
    parser.add_argument("--beta", type=float, default=0.999)
    parser.add_argument("--hidden", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--runs-root", type=str, default=None,
                        help="write history.csv/json and a loss plot under this directory")
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    net = build_net(args.hidden, rng)
    optimizer = build_optimizer(args, net)

    show(net)
    history = net.fit(
        XOR_INPUTS,
        XOR_OUTPUTS,
        optimizer,
        iterations=args.iterations,
        rng=rng,
        tag=f"xor_{args.optimizer}",
        runs_root=args.runs_root,
    )
    print(f"Training time: {history['time_s']:.2f}s")
    show(net)


if __name__ == "__main__":
    main()
