from .alphabet import SIZE, alpha_chr, alpha_ord
from .errors import InvalidPlugboard, InvalidReflector
from .permutation import Permutation, as_permutation


class Rotor:
    def __init__(self, wiring, position=0):
        self.map = as_permutation(wiring)

        # set by key at machine setup, then only moved by step()
        self.position = position % SIZE

    def set_position(self, letter):
        self.position = alpha_ord(letter)

    # signal paths, integer indices in and out
    def forward(self, value):
        return self.map.forward((value + self.position) % SIZE)

    def backward(self, value):
        return (SIZE + self.map.backward(value) - self.position) % SIZE

    def encode_forward(self, letter):
        return alpha_chr(self.forward(alpha_ord(letter)))

    def encode_backward(self, letter):
        return alpha_chr(self.backward(alpha_ord(letter)))

    def step(self):
        """Advance one position; True when a full revolution completes."""
        self.position = (self.position + 1) % SIZE
        return self.position == 0

    def copy(self):
        # the permutation is read-only, only the position needs to be separate
        return Rotor(self.map, self.position)

    @property
    def wiring(self):
        return self.map.wiring

    def status(self):
        return {
            'wiring': self.wiring,
            'position': self.position,
            'window': self.wiring[self.position],
        }

    def __repr__(self):
        return "Rotor('{}', position={})".format(self.wiring, self.position)


class Reflector:
    def __init__(self, wiring):
        self.map = as_permutation(wiring, InvalidReflector)

        if not self.map.is_involution():
            raise InvalidReflector(
                "reflector wiring must pair letters: {}".format(self.map.wiring))
        fixed = self.map.fixed_points()
        if fixed:
            raise InvalidReflector(
                "reflector cannot map a letter to itself: {}".format(
                    ''.join(alpha_chr(i) for i in fixed)))

    def reflect(self, letter):
        return alpha_chr(self.map.forward(alpha_ord(letter)))

    @property
    def wiring(self):
        return self.map.wiring

    def pairs(self):
        return self.map.pairs()

    def __eq__(self, other):
        if not isinstance(other, Reflector):
            return NotImplemented
        return self.map == other.map

    def __hash__(self):
        return hash(self.map)

    def __repr__(self):
        return "Reflector('{}')".format(self.wiring)


class Plugboard:
    MAX_PAIRS = SIZE // 2

    def __init__(self, wiring=None):
        if wiring is None:
            wiring = range(SIZE)
        self.map = as_permutation(wiring, InvalidPlugboard)

        # unplugged letters map to themselves, plugged ones must be swapped both ways
        if not self.map.is_involution():
            raise InvalidPlugboard(
                "plugboard wiring must pair letters: {}".format(self.map.wiring))

    @classmethod
    def from_pairs(cls, pairs):
        if isinstance(pairs, str):
            pairs = pairs.split()
        pairs = list(pairs)

        if len(pairs) > cls.MAX_PAIRS:
            raise InvalidPlugboard(
                "at most {} plugboard pairs, got {}".format(cls.MAX_PAIRS, len(pairs)))

        table = list(range(SIZE))
        used = set()
        for each in pairs:
            if len(each) != 2:
                raise InvalidPlugboard("pair {!r} must be exactly 2 letters".format(each))
            try:
                a, b = (alpha_ord(c) for c in each)
            except ValueError as err:
                raise InvalidPlugboard("pair {!r}: {}".format(each, err)) from err

            if a == b:
                raise InvalidPlugboard("cannot plug {} to itself".format(alpha_chr(a)))
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidPlugboard("{} is already plugged".format(alpha_chr(dup)))

            table[a], table[b] = b, a
            used.update((a, b))

        return cls(table)

    def apply(self, letter):
        return alpha_chr(self.map.forward(alpha_ord(letter)))

    @property
    def wiring(self):
        return self.map.wiring

    def pairs(self):
        return self.map.pairs()

    def __eq__(self, other):
        if not isinstance(other, Plugboard):
            return NotImplemented
        return self.map == other.map

    def __hash__(self):
        return hash(self.map)

    def __repr__(self):
        return "Plugboard('{}')".format(' '.join(self.pairs()))
