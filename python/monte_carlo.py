def count_hits(iterations, rng):
    inside = 0

    for _ in range(iterations):
        x, y = rng.next_pair()
        if x*x + y*y <= 1.0:
            inside += 1

    return inside


def estimate_pi(iterations, rng):
    if iterations <= 0:
        raise ValueError(f"iterations must be > 0, got {iterations}")

    inside = count_hits(iterations, rng)
    return 4.0 * inside / iterations
