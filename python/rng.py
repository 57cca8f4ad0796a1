import hashlib
from typing import NamedTuple

import numpy as np

# Largest float64 strictly below 1.0
BELOW_ONE = np.nextafter(1.0, 0.0)
U64_MAX = np.iinfo(np.uint64).max


class PairGenerator:
    """Produces one (x, y) pair in [0, 1) per call, advancing internal state."""

    def next_pair(self):
        raise NotImplementedError


# Linear Congruential Generator - tiny modulus, period 63 from a zero seed
class LCG(PairGenerator):
    def __init__(self):
        self.state = 0

    def step(self):
        self.state = (74 * self.state + 75) % 127
        return self.state

    def next_pair(self):
        x = self.step() / 126.0
        y = self.step() / 126.0
        return x, y


def unit_pair(digest):
    """Split a 16-byte digest into two little-endian uint64 halves scaled to [0, 1)."""
    halves = np.frombuffer(digest, dtype="<u8", count=2)
    x, y = np.minimum(halves.astype(np.float64) / float(U64_MAX), BELOW_ONE)
    return float(x), float(y)


class MD5Generator(PairGenerator):
    # Each digest is fed back in as the next input
    def __init__(self):
        self.buffer = bytes(16)

    def next_pair(self):
        self.buffer = hashlib.md5(self.buffer).digest()
        return unit_pair(self.buffer)


class UnknownGenerator(NamedTuple):
    name: str


GENERATORS = {'simple': LCG}
if 'md5' in hashlib.algorithms_available:
    GENERATORS['md5'] = MD5Generator


def names():
    return list(GENERATORS)


def get(name):
    """Build a fresh generator for `name`, or UnknownGenerator(name) if none is registered."""
    cls = GENERATORS.get(name)
    if cls is None:
        return UnknownGenerator(name)
    return cls()
