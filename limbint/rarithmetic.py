"""
This file defines the word-level arithmetic the bigint engine is built on:

SHIFT    number of bits in one limb
MASK     all-ones limb, also the neutral element of negative values
BASE     2**SHIFT
intmask  wrap a Python integer to a signed value of a given bit width,
         the way a C signed integer of that width would hold it
uintmask wrap a Python integer to an unsigned value of a given bit width
most_neg_value
         the most negative value of a signed type of a given width

NATIVE_TYPES maps the names of the C integer types accepted by
bigint.fromnative() to (bits, signed).
"""

SHIFT = 32
BASE = 1 << SHIFT
MASK = BASE - 1
TOPBIT = 1 << (SHIFT - 1)

LONG_BIT = 64
LONGLONG_BIT = 64

NATIVE_TYPES = {
    'int8':      (8, True),
    'uint8':     (8, False),
    'int16':     (16, True),
    'uint16':    (16, False),
    'int32':     (32, True),
    'uint32':    (32, False),
    'int64':     (64, True),
    'uint64':    (64, False),
    'int':       (32, True),
    'uint':      (32, False),
    'long':      (LONG_BIT, True),
    'ulong':     (LONG_BIT, False),
    'longlong':  (LONGLONG_BIT, True),
    'ulonglong': (LONGLONG_BIT, False),
}


def intmask(n, bits=LONG_BIT):
    """Mask a possibly larger value back to a signed value of 'bits' bits."""
    n &= (1 << bits) - 1
    if n >= 1 << (bits - 1):
        n -= 1 << bits
    return n

def uintmask(n, bits=LONG_BIT):
    return n & ((1 << bits) - 1)

def most_neg_value(bits):
    return -(1 << (bits - 1))

def native_type(name):
    """Return (bits, signed) for the C integer type called 'name'."""
    try:
        return NATIVE_TYPES[name]
    except KeyError:
        raise ValueError("unknown native integer type %r" % (name,))
