import string


UNRESERVED = frozenset(string.ascii_letters + string.digits + '-_.~')
HEXDIGITS = frozenset(string.hexdigits)


def is_unreserved(c: str) -> bool:
    return c in UNRESERVED


def is_hexdigit(c: str) -> bool:
    return c in HEXDIGITS
