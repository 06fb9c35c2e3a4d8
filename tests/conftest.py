import pytest

from enigma_machine import Plugboard, Reflector, Rotor

IDENTITY = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# A<->B, C<->D, ... Y<->Z
SWAP_REFLECTOR = "BADCFEHGJILKNMPORQTSVUXWZY"


@pytest.fixture
def identity_rotors():
    return [Rotor(IDENTITY) for _ in range(3)]


@pytest.fixture
def swap_reflector():
    return Reflector(SWAP_REFLECTOR)


@pytest.fixture
def plain_plugboard():
    return Plugboard()
