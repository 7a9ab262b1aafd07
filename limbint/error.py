
class BigintError(Exception):
    """Base class of the errors raised by the bigint engine."""


class InvalidFormat(BigintError, ValueError):
    """Signals a string that is not a decimal integer literal."""

    def __init__(self, string, char=None, pos=None):
        self.string = string
        self.char = char
        self.pos = pos
        if pos is None:
            msg = "empty string"
        else:
            msg = "invalid character at pos %d: %r" % (pos, char)
        BigintError.__init__(self, msg)
        self.msg = msg


class DivisionByZero(BigintError, ZeroDivisionError):

    def __init__(self, msg="bigint division or modulo by zero"):
        BigintError.__init__(self, msg)
        self.msg = msg
