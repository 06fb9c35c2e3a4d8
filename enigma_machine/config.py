"""
JSON machine configuration.

A config names the key, the rotors in machine order, the reflector and the
plugboard pairs::

    {
      "key": "CTR",
      "rotors": ["I", "II", "EKMFLGDQVZNTOWYHXUSPAIBRCJ"],
      "reflector": "B",
      "plugboard": "AB CD"
    }

Rotor and reflector entries are either a historical preset name or a full
26 letter wiring. Saved configs always spell out wirings.
"""
import json
import logging
from pathlib import Path

from .alphabet import SIZE
from .components import Plugboard, Reflector, Rotor
from .errors import ConfigFileError
from .machine import Machine
from .presets import HISTORICAL_REFLECTORS, HISTORICAL_ROTORS

logger = logging.getLogger(__name__)


def load_config(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise ConfigFileError("{} is not valid JSON: {}".format(path, err)) from err

    if not isinstance(cfg, dict):
        raise ConfigFileError("{} must hold a JSON object".format(path))
    logger.debug("loaded config from %s", path)
    return cfg


def _wiring(entry, presets, kind):
    if not isinstance(entry, str):
        raise ConfigFileError("{} entry must be a string, got {!r}".format(kind, entry))

    name = entry.upper()
    if name in presets:
        return presets[name]
    if len(entry) == SIZE:
        return entry
    raise ConfigFileError("unknown {} {!r}: expected one of {} or a {} letter wiring".format(
        kind, entry, sorted(presets), SIZE))


def build_machine(cfg):
    for field in ("key", "rotors", "reflector"):
        if field not in cfg:
            raise ConfigFileError("config is missing {!r}".format(field))

    if not isinstance(cfg["key"], str):
        raise ConfigFileError("'key' must be a string")
    if not isinstance(cfg["rotors"], list):
        raise ConfigFileError("'rotors' must be a list")
    rotors = [Rotor(_wiring(r, HISTORICAL_ROTORS, "rotor")) for r in cfg["rotors"]]
    reflector = Reflector(_wiring(cfg["reflector"], HISTORICAL_REFLECTORS, "reflector"))

    plugs = cfg.get("plugboard")
    if not (plugs is None or isinstance(plugs, str) or (
            isinstance(plugs, list) and all(isinstance(p, str) and len(p) == 2 for p in plugs))):
        raise ConfigFileError("'plugboard' must be a pair string or a list of 2 letter strings")
    plugboard = Plugboard() if plugs is None else Plugboard.from_pairs(plugs)

    return Machine(cfg["key"], rotors, reflector, plugboard)


def machine_to_config(machine):
    return {
        "key": machine.key,
        "rotors": [r.wiring for r in machine.rotors],
        "reflector": machine.reflector.wiring,
        "plugboard": " ".join(machine.plugboard.pairs()),
    }


def dump_config(machine):
    return json.dumps(machine_to_config(machine), indent=2)


def save_config(machine, path):
    path = Path(path)
    path.write_text(dump_config(machine) + "\n", encoding="utf-8")
    logger.info("wrote config to %s", path)
    return path
