import argparse
import logging
import math
import sys

import config
from bbs import BBSParams, generate_bbs_bits, generate_bbs_bits_parallel, bits_to_int
from bbs_errors import ValidationError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bbs", description="Blum Blum Shub pseudo-random bit generator")
    ap.add_argument("--p", type=int, default=config.EXAMPLE_P, help="safe prime p ≡ 3 (mod 4) (default: example prime)")
    ap.add_argument("--q", type=int, default=config.EXAMPLE_Q, help="safe prime q ≡ 3 (mod 4) (default: example prime)")
    ap.add_argument("--seed", type=int, default=config.EXAMPLE_SEED, help="seed coprime to p*q (default: example seed)")
    ap.add_argument("--seeds", type=int, nargs="+", help="run one independent generation per seed, in parallel")
    ap.add_argument("--bits", type=int, default=config.DEFAULT_NUM_BITS, help=f"number of bits (default: {config.DEFAULT_NUM_BITS})")
    ap.add_argument("--rounds", type=int, default=config.MILLER_RABIN_ROUNDS, help=f"Miller-Rabin rounds (default: {config.MILLER_RABIN_ROUNDS})")
    ap.add_argument("--workers", type=int, default=config.NUM_WORKERS, help="worker processes for --seeds (default: CPU count)")
    ap.add_argument("--log-level", default=config.LOG_LEVEL, help=f"logging level (default: {config.LOG_LEVEL})")
    return ap


def run_single(args: argparse.Namespace) -> None:
    bits = generate_bbs_bits(args.p, args.q, args.seed, args.bits, args.rounds)

    print(f"GCD of (p-3)/2, (q-3)/2 is: {math.gcd((args.p - 3) // 2, (args.q - 3) // 2)}")
    print(f"Generated BBS Random Bits: {list(bits)}")
    print(f"As an Array of Integers (0 and 1): {[int(bit) for bit in bits]}")
    print(f"As a Random Integer: {bits_to_int(bits)}")


def run_parallel(args: argparse.Namespace) -> None:
    jobs = [BBSParams(args.p, args.q, seed, args.bits, args.rounds) for seed in args.seeds]
    print(f"[INFO] Generating {args.bits} bits for {len(jobs)} seeds…")
    for job, bits in zip(jobs, generate_bbs_bits_parallel(jobs, args.workers)):
        print(f"seed={job.seed}: bits={''.join(str(int(bit)) for bit in bits)} integer={bits_to_int(bits)}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        if args.seeds:
            run_parallel(args)
        else:
            run_single(args)
    except ValidationError as e:
        print(f"[ERROR] Invalid BBS parameters ({e.kind}): {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
