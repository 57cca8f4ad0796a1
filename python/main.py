#!/usr/bin/env python3
import sys
import time
import getopt
import rng
from monte_carlo import estimate_pi

USAGE = "pineapple [-h] [-r {rng}] -n {iterations}"


def fail(message):
    print(f"pineapple: {message}", file=sys.stderr)
    sys.exit(1)


def parse_iterations(value):
    try:
        iterations = int(value)
    except ValueError:
        fail(f"invalid number of iterations '{value}'; must be >0")
    if iterations <= 0:
        fail(f"invalid number of iterations '{value}'; must be >0")
    return iterations


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, _ = getopt.getopt(argv, "hr:n:")
    except getopt.GetoptError as e:
        fail(str(e))

    rng_name = 'simple'
    iterations = None
    for opt, value in opts:
        if opt == '-h':
            print(USAGE)
            print(f"Available rngs: {', '.join(rng.names())}")
            sys.exit(0)
        elif opt == '-r':
            rng_name = value
        elif opt == '-n':
            iterations = parse_iterations(value)

    if iterations is None:
        fail("no number of iterations given; must be >0")

    generator = rng.get(rng_name)
    if isinstance(generator, rng.UnknownGenerator):
        fail(f"unknown rng '{generator.name}'")

    print(f"Doing {iterations} iterations with the {rng_name} rng... ", end="", flush=True)
    start_time = time.time()
    pi_estimate = estimate_pi(iterations, generator)
    estimate_time = time.time() - start_time
    print("done.")

    print(f"Estimation took {estimate_time * 1000:.2f}ms")
    print(f"pi ~ {pi_estimate:f}")


if __name__ == "__main__":
    main()
