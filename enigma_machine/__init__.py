from .alphabet import alpha_chr, alpha_ord, is_symbol
from .components import Plugboard, Reflector, Rotor
from .config import build_machine, load_config, machine_to_config, save_config
from .display import format_status
from .errors import (
    ConfigFileError, ConfigurationError, EmptyRotorSet, EnigmaError,
    InvalidKey, InvalidPermutation, InvalidPlugboard, InvalidReflector,
    KeyLengthMismatch,
)
from .generate import (
    make_rng, random_machine, random_permutation, random_plugboard,
    random_reflector, random_rotor,
)
from .machine import Machine, advance_positions
from .permutation import Permutation
from .presets import HISTORICAL_REFLECTORS, HISTORICAL_ROTORS

__all__ = [
    "Permutation", "Rotor", "Reflector", "Plugboard", "Machine",
    "advance_positions", "alpha_ord", "alpha_chr", "is_symbol",
    "make_rng", "random_permutation", "random_rotor", "random_reflector",
    "random_plugboard", "random_machine",
    "load_config", "build_machine", "machine_to_config", "save_config",
    "format_status", "HISTORICAL_ROTORS", "HISTORICAL_REFLECTORS",
    "EnigmaError", "ConfigurationError", "EmptyRotorSet", "KeyLengthMismatch",
    "InvalidKey", "InvalidPermutation", "InvalidReflector", "InvalidPlugboard",
    "ConfigFileError",
]
__version__ = "0.1.0"
