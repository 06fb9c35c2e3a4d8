"""
Random rotors, reflectors and plugboards.

Every function takes a numpy ``Generator`` so callers (and tests) decide the
randomness: ``make_rng(seed)`` gives repeatable output, ``make_rng()`` gives
fresh entropy.
"""
import logging

import numpy as np

from .alphabet import SIZE
from .components import Plugboard, Reflector, Rotor
from .machine import Machine
from .permutation import Permutation

logger = logging.getLogger(__name__)

DEFAULT_PLUG_PAIRS = 6


def make_rng(seed=None):
    return np.random.default_rng(seed)


def random_permutation(rng):
    return Permutation(rng.permutation(SIZE))


def random_rotor(rng):
    return Rotor(random_permutation(rng))


def _random_involution(rng, pairs):
    # pairs are drawn without replacement, so no letter is plugged twice
    table = np.arange(SIZE)
    for a, b in rng.choice(SIZE, (pairs, 2), replace=False):
        table[a] = b
        table[b] = a
    return table


def random_reflector(rng):
    return Reflector(_random_involution(rng, SIZE // 2))


def random_plugboard(rng, max_pairs=DEFAULT_PLUG_PAIRS):
    if not 0 <= max_pairs <= Plugboard.MAX_PAIRS:
        raise ValueError("max_pairs must be within 0-{}".format(Plugboard.MAX_PAIRS))

    pairs = int(rng.integers(0, max_pairs + 1))
    return Plugboard(_random_involution(rng, pairs))


def random_machine(key, rng=None, seed=None, max_pairs=DEFAULT_PLUG_PAIRS):
    """Machine with one random rotor per key letter.

    Draw order is rotors, reflector, plugboard, so one seed always gives the
    same machine.
    """
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")
    if rng is None:
        rng = make_rng(seed)

    rotors = [random_rotor(rng) for _ in key]
    reflector = random_reflector(rng)
    plugboard = random_plugboard(rng, max_pairs)

    logger.debug("generated %d rotors, reflector %s, plugboard %s",
                 len(rotors), reflector.wiring, plugboard.pairs())
    return Machine(key, rotors, reflector, plugboard)
