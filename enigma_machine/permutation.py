import numpy as np

from .alphabet import SIZE, alpha_chr, alpha_ord
from .errors import InvalidPermutation


class Permutation:
    """Bijection over the 26 letter indices with its inverse precomputed.

    ``table`` is either a sequence of 26 indices or a 26 letter wiring such as
    ``'EKMFLGDQVZNTOWYHXUSPAIBRCJ'`` (position i maps to the letter at i).
    """

    def __init__(self, table):
        if isinstance(table, Permutation):
            forward = table._forward
        else:
            forward = _to_array(table)

        if forward.shape != (SIZE,) \
                or not np.array_equal(np.sort(forward), np.arange(SIZE)):
            raise InvalidPermutation(
                "not a permutation of the alphabet: {}".format(list(forward)))

        self._forward = forward.copy()
        self._backward = np.argsort(self._forward)

        # shared between rotors, reflectors and machine copies
        self._forward.flags.writeable = False
        self._backward.flags.writeable = False

    @classmethod
    def identity(cls):
        return cls(range(SIZE))

    def forward(self, value):
        return int(self._forward[value])

    def backward(self, value):
        return int(self._backward[value])

    @property
    def table(self):
        return self._forward.tolist()

    @property
    def wiring(self):
        return ''.join(alpha_chr(c) for c in self._forward)

    def is_involution(self):
        return np.array_equal(self._forward[self._forward], np.arange(SIZE))

    def fixed_points(self):
        return np.flatnonzero(self._forward == np.arange(SIZE)).tolist()

    def pairs(self):
        # 2-cycles only, as 'AB' strings with the lower letter first
        return [alpha_chr(a) + alpha_chr(b)
                for a, b in enumerate(self._forward.tolist())
                if a < b and self._forward[b] == a]

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return np.array_equal(self._forward, other._forward)

    def __hash__(self):
        return hash(tuple(self.table))

    def __repr__(self):
        return "Permutation('{}')".format(self.wiring)


def _to_array(table):
    if isinstance(table, str):
        try:
            table = [alpha_ord(c) for c in table]
        except ValueError as err:
            raise InvalidPermutation(str(err)) from err

    try:
        return np.array(list(table), dtype=int)
    except (TypeError, ValueError) as err:
        raise InvalidPermutation("invalid table {!r}".format(table)) from err


def as_permutation(wiring, error=InvalidPermutation):
    """Build a Permutation, re-raising failures as ``error``."""
    try:
        return Permutation(wiring)
    except InvalidPermutation as err:
        if isinstance(err, error):
            raise
        raise error(str(err)) from err
