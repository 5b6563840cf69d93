from asciitile.errors import OutOfRangeCharacter

FIRST_CHAR = 32
LAST_CHAR = 126

ASCII_PRINTABLE = "".join(chr(i) for i in range(FIRST_CHAR, LAST_CHAR + 1))

DIGITS = "0123456789"

# Keywords understood by parse_charset alongside single characters and "a-z" ranges
ALL = "all"
SPACE = "space"


def is_printable(char: str) -> bool:
    return len(char) == 1 and FIRST_CHAR <= ord(char) <= LAST_CHAR


def check_printable(char: str) -> str:
    if not isinstance(char, str) or not is_printable(char):
        raise OutOfRangeCharacter(char)
    return char


def parse_charset(argument: str) -> str:
    """Expand a charset argument into the characters it names.

    Accepts a single printable character, ``all`` for the whole printable range,
    ``space`` for the space character, or an inclusive range such as ``a-z``
    (endpoints may be given in either order). A lone ``-`` is the character itself.
    """
    if argument == ALL:
        return ASCII_PRINTABLE
    if argument == SPACE:
        return " "
    if len(argument) == 1:
        return check_printable(argument)
    if len(argument) == 3 and argument[1] == "-":
        first, last = sorted((check_printable(argument[0]), check_printable(argument[2])))
        return "".join(chr(i) for i in range(ord(first), ord(last) + 1))
    raise ValueError(f"Unrecognised charset argument: {argument!r}")
