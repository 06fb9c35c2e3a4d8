import string

SIZE = 26
LETTERS = string.ascii_uppercase


def is_symbol(x):
    # only ascii letters take part in the cipher, everything else passes through
    return isinstance(x, str) and len(x) == 1 and x in string.ascii_letters


def alpha_ord(x):
    if not is_symbol(x):
        raise ValueError("expected a single letter (a-z), got {!r}".format(x))

    # magic 65 from text encoding
    return ord(x.upper()) - 65


def alpha_chr(value):
    return LETTERS[value]
