import argparse
import sys

from sampling import InvalidArgument, draw_betas, format_message, summarize_samples

A = 2.0  # shape parameter 1
B = 1.0  # shape parameter 2
N = 5  # number of samples


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Draw samples from Beta(a, b) via the gamma-ratio method.")
    p.add_argument("--n", type=int, default=N, help="number of samples")
    p.add_argument("--a", type=float, default=A, help="first shape parameter (> 0)")
    p.add_argument("--b", type=float, default=B, help="second shape parameter (> 0)")
    p.add_argument("--seed", type=int, default=None, help="fix the generator state for a reproducible sequence")
    p.add_argument("--summary", action="store_true", help="print mean/variance/min/max after the samples")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        betas = draw_betas(args.n, args.a, args.b, seed=args.seed)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for value in betas:
        print(format_message(value, args.a, args.b))

    if args.summary:
        print("-" * 30)
        print(summarize_samples(betas).to_string())

    return 0


if __name__ == "__main__":
    sys.exit(main())
