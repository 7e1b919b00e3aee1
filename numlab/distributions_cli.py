"""Sample random distributions and sums of uniform numbers."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator, Sequence

from numlab.random_gen import RandomGen
from numlab.stats import Histogram, variance


def sample_distributions(gen: RandomGen, count: int) -> dict[str, list[float]]:
    """Draw ``count`` values from each of four distributions, interleaved.

    Uniform on [5, 10), exponential with rate 1, and normal with mean 1 and
    sigma 1 both by Box-Muller and by accept-reject.
    """
    samples: dict[str, list[float]] = {
        "Uniforme": [],
        "Esponenziale": [],
        "Gaussiana Box-Muller": [],
        "Gaussiana Accept-Reject": [],
    }
    for _ in range(count):
        samples["Uniforme"].append(gen.unif(5.0, 10.0))
        samples["Esponenziale"].append(gen.exp(1.0))
        samples["Gaussiana Box-Muller"].append(gen.gaus(1.0, 1.0))
        samples["Gaussiana Accept-Reject"].append(gen.gaus_ar(1.0, 1.0, 0.4))
    return samples


def sums_of_uniforms(gen: RandomGen, n: int, trials: int) -> list[float]:
    """Return ``trials`` sums, each of ``n`` uniform numbers in [0, 1)."""
    if n <= 0:
        raise ValueError(f"n must be a positive integer, got {n}")
    return [sum(gen.rand() for _ in range(n)) for _ in range(trials)]


_RANGES = {
    "Uniforme": (5.0, 10.0),
    "Esponenziale": (0.0, 10.0),
    "Gaussiana Box-Muller": (-5.0, 5.0),
    "Gaussiana Accept-Reject": (-5.0, 5.0),
}


def _render(title: str, hist: Histogram) -> Iterator[str]:
    yield title
    for edge, count in zip(hist.bin_edges(), hist.counts):
        yield f"{edge:12.5g} {count}"
    yield f"underflow {hist.underflow} overflow {hist.overflow}"


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError("<N> deve essere un numero intero positivo")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlab-distributions", description=__doc__
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sample = sub.add_parser("sample", help="histograms of four distributions")
    sample.add_argument("--count", type=_positive_int, default=10000)
    sums = sub.add_parser("sums", help="histograms of numbers and of their sums")
    sums.add_argument("n", type=_positive_int)
    sums.add_argument("--trials", type=_positive_int, default=10000)
    clt = sub.add_parser("clt", help="spread of sums of 1 to 12 uniform numbers")
    clt.add_argument("--trials", type=_positive_int, default=100000)
    for p in (sample, sums, clt):
        p.add_argument("--seed", type=int, default=1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    gen = RandomGen(args.seed)

    if args.command == "sample":
        for name, values in sample_distributions(gen, args.count).items():
            hist = Histogram(70, *_RANGES[name])
            hist.fill_all(values)
            print("\n".join(_render(name, hist)))
    elif args.command == "sums":
        numbers = Histogram(50, 0.0, 1.0)
        sums = Histogram(50, 0.0, float(args.n))
        for _ in range(args.trials):
            draws = [gen.rand() for _ in range(args.n)]
            numbers.fill_all(draws)
            sums.fill(sum(draws))
        print("\n".join(_render("Numeri", numbers)))
        print("\n".join(_render("Somme", sums)))
    else:
        print("N sigma")
        for n in range(1, 13):
            spread = math.sqrt(variance(sums_of_uniforms(gen, n, args.trials)))
            print(f"{n} {spread:.6g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())