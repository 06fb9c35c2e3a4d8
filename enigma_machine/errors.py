class EnigmaError(Exception):
    pass


class ConfigurationError(EnigmaError):
    """Raised while building a machine; no partial machine is produced."""


class EmptyRotorSet(ConfigurationError):
    def __init__(self):
        super().__init__("a machine needs at least one rotor")


class KeyLengthMismatch(ConfigurationError):
    def __init__(self, key_length, rotor_count):
        super().__init__(
            "key has {} characters but the machine has {} rotors".format(
                key_length, rotor_count))
        self.key_length = key_length
        self.rotor_count = rotor_count


class InvalidKey(ConfigurationError):
    pass


class InvalidPermutation(ConfigurationError):
    pass


class InvalidReflector(InvalidPermutation):
    pass


class InvalidPlugboard(InvalidPermutation):
    pass


class ConfigFileError(ConfigurationError):
    pass
