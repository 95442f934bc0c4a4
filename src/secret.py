import string

from errors import InvalidFormat

SECRET_LENGTH = 192
HEX_DIGITS = frozenset(string.hexdigits)


class AppSecret:
    """
    A 192-character hex digest. Values from outside the generator are
    validated on construction; values built by the derivation pipeline go
    through `unchecked`.
    """

    __slots__ = ("_value",)

    def __init__(self, value):
        if not _is_hex_digest(value):
            raise InvalidFormat()
        self._value = value

    @classmethod
    def unchecked(cls, value):
        secret = cls.__new__(cls)
        secret._value = value
        return secret

    def as_str(self):
        return self._value

    def is_valid(self):
        return _is_hex_digest(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        # Keep the digest out of logs and tracebacks.
        return f"AppSecret('{self._value[:4]}...')"

    def __eq__(self, other):
        if isinstance(other, AppSecret):
            return self._value == other._value
        return NotImplemented

    def __hash__(self):
        return hash(self._value)


def _is_hex_digest(value):
    return (
        isinstance(value, str)
        and len(value) == SECRET_LENGTH
        and all(c in HEX_DIGITS for c in value)
    )
