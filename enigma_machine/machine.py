import logging
from collections.abc import MutableSequence

from .alphabet import SIZE, alpha_chr, is_symbol
from .components import Plugboard
from .errors import EmptyRotorSet, InvalidKey, KeyLengthMismatch

logger = logging.getLogger(__name__)


def advance_positions(positions):
    """Odometer step over a tuple of rotor positions, first rotor fastest.

    Mirrors ``Machine.advance_rotors`` without touching any rotor.
    """
    positions = list(positions)
    for i in range(len(positions)):
        positions[i] = (positions[i] + 1) % SIZE
        if positions[i] != 0:
            break
    return tuple(positions)


class Machine:
    # handles machine level behavior: symbol path and the stepping cascade
    def __init__(self, key, rotors, reflector, plugboard=None):
        rotors = list(rotors)
        if not rotors:
            raise EmptyRotorSet()
        if len(key) != len(rotors):
            raise KeyLengthMismatch(len(key), len(rotors))

        # rotors are copied so a sender and a receiver can be built from one set
        self.rotors = [r.copy() for r in rotors]
        self.reflector = reflector
        self.plugboard = plugboard if plugboard is not None else Plugboard()

        self.key = _check_key(key)
        self.reset()

        logger.info("machine ready: %d rotors, key %s, %d plugboard pairs",
                    len(self.rotors), self.key, len(self.plugboard.pairs()))

    def reset(self, key=None):
        """Set rotor positions from ``key`` (or the current key) again."""
        if key is not None:
            if len(key) != len(self.rotors):
                raise KeyLengthMismatch(len(key), len(self.rotors))
            self.key = _check_key(key)

        for rotor, c in zip(self.rotors, self.key):
            rotor.set_position(c)

    @property
    def positions(self):
        return tuple(r.position for r in self.rotors)

    @property
    def indicator(self):
        return ''.join(alpha_chr(p) for p in self.positions)

    def advance_rotors(self):
        for rotor in self.rotors:
            # a rotor only carries into the next one after a full revolution
            if not rotor.step():
                break

    def encode_letter(self, letter):
        c = letter.upper()

        c = self.plugboard.apply(c)
        for rotor in self.rotors:
            c = rotor.encode_forward(c)

        c = self.reflector.reflect(c)

        for rotor in reversed(self.rotors):
            c = rotor.encode_backward(c)
        c = self.plugboard.apply(c)

        # state moves only after the substitution is done
        self.advance_rotors()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s -> %s, positions now %s", letter, c, self.indicator)
        return c

    def encode(self, text):
        """Encode a string, or a list of characters in place; any other
        sequence comes back as a tuple.

        Anything that is not a letter is copied through and does not step
        the rotors. Encoding is its own inverse for an identically set up
        machine.
        """
        out = list(text)
        for i, c in enumerate(out):
            if not is_symbol(c):
                continue
            out[i] = self.encode_letter(c)

        if isinstance(text, str):
            return ''.join(out)
        if isinstance(text, MutableSequence):
            text[:] = out
            return text
        return tuple(out)

    def copy(self):
        clone = Machine(self.indicator, self.rotors, self.reflector, self.plugboard)
        clone.key = self.key
        return clone

    def status(self):
        return {
            'plugboard': self.plugboard.pairs(),
            'rotors': [r.status() for r in self.rotors],
            'reflector': self.reflector.pairs(),
        }

    def __repr__(self):
        return "<Machine rotors={} positions={} plugs={}>".format(
            len(self.rotors), self.indicator, ' '.join(self.plugboard.pairs()))


def _check_key(key):
    key = ''.join(key)
    for c in key:
        if not is_symbol(c):
            raise InvalidKey("key must be letters only, got {!r}".format(key))
    return key.upper()
