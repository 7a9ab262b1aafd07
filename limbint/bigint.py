import sys

from limbint.rarithmetic import SHIFT, MASK, TOPBIT
from limbint.rarithmetic import intmask, uintmask, most_neg_value, native_type
from limbint.error import InvalidFormat, DivisionByZero
from limbint.config.bigintoption import get_bigint_config
from limbint.tool.ansi_print import AnsiLogger

log = AnsiLogger("divrem")

# note about the representation:
# a bigint is a list of unsigned SHIFT-bit limbs, least significant first,
# plus one boolean telling whether the bits above the last limb are all
# zeros or all ones.  Read as an infinitely wide two's-complement number
# this gives the value; the bitwise operators work directly on it.

NULLDIGIT = 0
ONEDIGIT = 1

# Largest block of decimal digits that always fits into one limb, and the
# thresholds used while parsing to decide that the next digit might not.
DEC_MAX = 10 ** 9
BLOCK_MAX = (MASK - 9) // 10
TENS_MAX = MASK // 10
DECDIGITS = '0123456789'

_config = get_bigint_config()

def get_config():
    return _config

def set_config(config):
    """Install 'config' as the engine configuration, returning the old one."""
    global _config
    old = _config
    _config = config
    return old


def _check_digits(v):
    for x in v._digits:
        assert type(x) is int
        assert 0 <= x <= MASK
    assert not v._digits or v._digits[-1] != v.neutral()


class DivisionStats(object):
    """Counts the quotient digits computed by the long division and the
    corrections their estimates needed."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.digits = 0
        self.corrections = 0
        self.max_corrections = 0

    def record(self, corrections):
        self.digits += 1
        self.corrections += corrections
        if corrections > self.max_corrections:
            self.max_corrections = corrections

division_stats = DivisionStats()


class bigint(object):
    """This is an implementation of unbounded integers as a list of
    two's-complement limbs."""

    def __init__(self, digits=None, negative=False):
        # the new value owns 'digits'
        if digits is None:
            digits = []
        self._digits = digits
        self._negative = bool(negative)
        self._normalize()

    def digit(self, x):
        """Return the x'th limb, or the sign fill above the stored limbs."""
        if x < len(self._digits):
            return self._digits[x]
        return MASK if self._negative else NULLDIGIT

    def neutral(self):
        return MASK if self._negative else NULLDIGIT

    def numdigits(self):
        return len(self._digits)

    def numdigits_abs(self):
        """Number of limbs of the magnitude."""
        size = len(self._digits)
        # -2**(SHIFT*size) is the only negative value whose magnitude
        # needs one more limb than its two's-complement form
        if self._negative and not any(self._digits):
            size += 1
        return size

    def _normalize(self):
        digits = self._digits
        neutral = self.neutral()
        while digits and digits[-1] == neutral:
            digits.pop()
        if _config.debug.check_canonical:
            _check_digits(self)

    # ____________________________________________________________
    # construction

    @staticmethod
    def fromint(intval):
        if isinstance(intval, bool):
            return bigint.frombool(intval)
        if not isinstance(intval, int):
            raise TypeError("expected an integer, got %r" %
                            (type(intval).__name__,))
        if intval >= 0:
            return bigint(digits_from_nonneg_long(intval))
        if intval == -1:
            return bigint([], True)
        z = bigint(digits_from_nonneg_long(-intval))
        z.inplace_neg()
        return z

    @staticmethod
    def frombool(b):
        if b:
            return bigint([ONEDIGIT])
        return bigint()

    @staticmethod
    def fromnative(intval, ctype='long'):
        """Build a bigint from a value of the C integer type 'ctype', after
        wrapping it to that type's width."""
        bits, signed = native_type(ctype)
        if signed:
            x = intmask(intval, bits)
            if x == most_neg_value(bits):
                return bigint(digits_for_most_neg_long(bits), True)
        else:
            x = uintmask(intval, bits)
        return bigint.fromint(x)

    @staticmethod
    def fromdecimalstr(s):
        return _decimalstr_to_bigint(s)

    def copy(self):
        return bigint(self._digits[:], self._negative)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def swap(self, other):
        self._digits, other._digits = other._digits, self._digits
        self._negative, other._negative = other._negative, self._negative

    # ____________________________________________________________
    # conversions

    def tolong(self):
        l = 0
        for d in reversed(self._digits):
            l = (l << SHIFT) | d
        if self._negative:
            l -= 1 << (SHIFT * len(self._digits))
        return l

    def tobool(self):
        return not self.is_zero()

    def is_zero(self):
        return not self._digits and not self._negative

    def is_minus_one(self):
        return not self._digits and self._negative

    def str(self):
        return _format_decimal(self)

    def hash(self):
        return _hash(self)

    def bit_length(self):
        a = self.abs()
        if not a._digits:
            return 0
        return (len(a._digits) - 1) * SHIFT + a._digits[-1].bit_length()

    # ____________________________________________________________
    # comparisons

    def eq(self, other):
        other = _as_bigint(other)
        return (self._negative == other._negative and
                self._digits == other._digits)

    def ne(self, other):
        return not self.eq(other)

    def lt(self, other):
        other = _as_bigint(other)
        if self._negative != other._negative:
            return self._negative
        ld1 = len(self._digits)
        ld2 = len(other._digits)
        if ld1 != ld2:
            # more limbs means further away from zero
            return (ld1 < ld2) != self._negative
        i = ld1 - 1
        while i >= 0:
            d1 = self._digits[i]
            d2 = other._digits[i]
            if d1 != d2:
                return d1 < d2
            i -= 1
        return False

    def le(self, other):
        return not _as_bigint(other).lt(self)

    def gt(self, other):
        return _as_bigint(other).lt(self)

    def ge(self, other):
        return not self.lt(other)

    # ____________________________________________________________
    # the carry engine

    def _inplace_subadd(self, other, plus):
        if len(other._digits) == 1 and not other._negative:
            return self._inplace_small_add(other._digits[0], plus)

        size = max(len(self._digits), len(other._digits)) + 2
        flip = NULLDIGIT if plus else MASK
        carry = 0 if plus else 1
        digits = [NULLDIGIT] * size
        for i in range(size):
            carry += self.digit(i) + (other.digit(i) ^ flip)
            digits[i] = carry & MASK
            carry >>= SHIFT
        self._digits = digits
        self._negative = bool(digits[-1] & TOPBIT)
        self._normalize()
        return self

    def _inplace_small_add(self, x, plus=True):
        """Add (or subtract) the limb x in place."""
        assert 0 <= x <= MASK
        neutral = self.neutral()
        digits = self._digits
        digits.append(neutral)
        digits.append(neutral)
        if plus:
            steady, fill = 0, NULLDIGIT
        else:
            steady, fill = 1, MASK
            x ^= MASK
        carry = steady + digits[0] + x
        digits[0] = carry & MASK
        carry >>= SHIFT
        i = 1
        while carry != steady and i < len(digits):
            carry += digits[i] + fill
            digits[i] = carry & MASK
            carry >>= SHIFT
            i += 1
        self._negative = bool(digits[-1] & TOPBIT)
        self._normalize()
        return self

    def inplace_add(self, other):
        return self._inplace_subadd(_as_bigint(other), True)

    def inplace_sub(self, other):
        return self._inplace_subadd(_as_bigint(other), False)

    def incr(self):
        return self._inplace_small_add(ONEDIGIT, True)

    def decr(self):
        return self._inplace_small_add(ONEDIGIT, False)

    def add(self, other):
        return self.copy().inplace_add(other)

    def sub(self, other):
        return self.copy().inplace_sub(other)

    # ____________________________________________________________
    # sign handling

    def inplace_invert(self):
        self._digits = [d ^ MASK for d in self._digits]
        self._negative = not self._negative
        return self

    def inplace_neg(self):
        self.inplace_invert()
        return self._inplace_small_add(ONEDIGIT, True)

    def inplace_abs(self):
        if self._negative:
            self.inplace_neg()
        return self

    def invert(self):
        # -1 has no limbs: flipping the sign alone turns it into 0
        return self.copy().inplace_invert()

    def neg(self):
        return self.copy().inplace_neg()

    def abs(self):
        return self.copy().inplace_abs()

    def pos(self):
        return self.copy()

    # ____________________________________________________________
    # multiplication

    def _inplace_small_mul(self, x):
        """Multiply in place by the limb x."""
        assert 0 <= x <= MASK
        negative = self._negative
        self.inplace_abs()
        digits = self._digits
        carry = 0
        for i in range(len(digits)):
            carry += digits[i] * x
            digits[i] = carry & MASK
            carry >>= SHIFT
        if carry:
            digits.append(carry)
        self._normalize()
        if negative:
            self.inplace_neg()
        return self

    def mul(self, other):
        other = _as_bigint(other)
        if self.is_zero() or other.is_zero():
            return bigint()
        negative = self._negative != other._negative
        a = self.abs()._digits
        b = other.abs()._digits
        if (_config.mul.karatsuba and
                min(len(a), len(b)) > _config.mul.karatsuba_cutoff):
            digits = _k_mul(a, b, _config.mul.karatsuba_cutoff)
        else:
            digits = _x_mul(a, b)
        z = bigint(digits)
        if negative:
            z.inplace_neg()
        return z

    def inplace_mul(self, other):
        z = self.mul(other)
        self._digits = z._digits
        self._negative = z._negative
        return self

    # ____________________________________________________________
    # division

    def _inplace_divrem1(self, x):
        """Divide the magnitude in place by the non-zero limb x, keeping the
        sign.  Returns the (unsigned) remainder."""
        if x == 0:
            raise DivisionByZero()
        assert 0 < x <= MASK
        negative = self._negative
        self.inplace_abs()
        digits = self._digits
        rem = 0
        i = len(digits) - 1
        while i >= 0:
            rem = (rem << SHIFT) | digits[i]
            hi = rem // x
            digits[i] = hi
            rem -= hi * x
            i -= 1
        self._normalize()
        if negative:
            self.inplace_neg()
        return rem

    def divrem1(self, x):
        z = self.copy()
        rem = z._inplace_divrem1(x)
        return z, rem

    def divrem(self, other):
        """Truncating division: the quotient is rounded towards zero and
        the remainder has the sign of self."""
        return _divrem(self, _as_bigint(other))

    def div(self, other):
        return self.divrem(other)[0]

    def mod(self, other):
        return self.divrem(other)[1]

    def floordiv(self, other):
        other = _as_bigint(other)
        div, rem = _divrem(self, other)
        if not rem.is_zero() and rem._negative != other._negative:
            div.decr()
        return div

    def inplace_div(self, other):
        z = self.div(other)
        self._digits = z._digits
        self._negative = z._negative
        return self

    def inplace_mod(self, other):
        z = self.mod(other)
        self._digits = z._digits
        self._negative = z._negative
        return self

    # ____________________________________________________________
    # bitwise operations and shifts

    def and_(self, other):
        return _bitwise(self, '&', _as_bigint(other))

    def or_(self, other):
        return _bitwise(self, '|', _as_bigint(other))

    def xor(self, other):
        return _bitwise(self, '^', _as_bigint(other))

    def inplace_and(self, other):
        return self._inplace_set(self.and_(other))

    def inplace_or(self, other):
        return self._inplace_set(self.or_(other))

    def inplace_xor(self, other):
        return self._inplace_set(self.xor(other))

    def _inplace_set(self, z):
        self._digits = z._digits
        self._negative = z._negative
        return self

    def inplace_lshift(self, int_other):
        int_other = _shift_count(int_other)
        if int_other == 0:
            return self

        wordshift, remshift = divmod(int_other, SHIFT)
        digits = [NULLDIGIT] * wordshift + self._digits + [self.neutral()]
        if remshift:
            accum = 0
            for i in range(wordshift, len(digits)):
                accum += digits[i] << remshift
                digits[i] = accum & MASK
                accum >>= SHIFT
            # what is left in accum are copies of the sign bit
        self._digits = digits
        self._normalize()
        return self

    def inplace_rshift(self, int_other):
        int_other = _shift_count(int_other)
        if int_other == 0:
            return self
        if self._negative:
            # floor semantics: x >> n == ~((~x) >> n), and ~x >= 0 here
            self.inplace_invert()
            self._rshift_nonneg(int_other)
            self.inplace_invert()
        else:
            self._rshift_nonneg(int_other)
        return self

    def _rshift_nonneg(self, int_other):
        wordshift, loshift = divmod(int_other, SHIFT)
        if loshift:
            self._inplace_divrem1(1 << loshift)
        del self._digits[:wordshift]
        self._normalize()

    def lshift(self, int_other):
        return self.copy().inplace_lshift(int_other)

    def rshift(self, int_other):
        return self.copy().inplace_rshift(int_other)

    # ____________________________________________________________
    # Python protocol

    def _make_binop(methname, reflected=False):
        #
        def binop(self, other):
            if not isinstance(other, (bigint, int)):
                return NotImplemented
            if reflected:
                return getattr(_as_bigint(other), methname)(self)
            return getattr(self, methname)(other)
        #
        return binop

    __add__       = _make_binop('add')
    __radd__      = _make_binop('add', True)
    __sub__       = _make_binop('sub')
    __rsub__      = _make_binop('sub', True)
    __mul__       = _make_binop('mul')
    __rmul__      = _make_binop('mul', True)
    __truediv__   = _make_binop('div')
    __rtruediv__  = _make_binop('div', True)
    __mod__       = _make_binop('mod')
    __rmod__      = _make_binop('mod', True)
    __divmod__    = _make_binop('divrem')
    __rdivmod__   = _make_binop('divrem', True)
    __floordiv__  = _make_binop('floordiv')
    __rfloordiv__ = _make_binop('floordiv', True)
    __and__       = _make_binop('and_')
    __rand__      = _make_binop('and_', True)
    __or__        = _make_binop('or_')
    __ror__       = _make_binop('or_', True)
    __xor__       = _make_binop('xor')
    __rxor__      = _make_binop('xor', True)
    __lshift__    = _make_binop('lshift')
    __rlshift__   = _make_binop('lshift', True)
    __rshift__    = _make_binop('rshift')
    __rrshift__   = _make_binop('rshift', True)
    __eq__        = _make_binop('eq')
    __ne__        = _make_binop('ne')
    __lt__        = _make_binop('lt')
    __le__        = _make_binop('le')
    __gt__        = _make_binop('gt')
    __ge__        = _make_binop('ge')

    del _make_binop

    def __neg__(self):
        return self.neg()

    def __pos__(self):
        return self.pos()

    def __abs__(self):
        return self.abs()

    def __invert__(self):
        return self.invert()

    def __bool__(self):
        return self.tobool()

    def __int__(self):
        return self.tolong()

    __index__ = __int__

    def __hash__(self):
        return self.hash()

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "<bigint digits=%s, negative=%s, %s>" % (
            ['0x%08x' % d for d in self._digits], self._negative, self.str())


#_________________________________________________________________

# Helper Functions


def _as_bigint(x):
    if isinstance(x, bigint):
        return x
    return bigint.fromint(x)

def _shift_count(n):
    if isinstance(n, bigint):
        n = n.tolong()
    elif not isinstance(n, int):
        raise TypeError("shift count must be an integer, not %r" %
                        (type(n).__name__,))
    if n < 0:
        raise ValueError("negative shift count")
    return n

def digits_from_nonneg_long(l):
    digits = []
    while l:
        digits.append(l & MASK)
        l >>= SHIFT
    return digits

def digits_for_most_neg_long(bits):
    # The most negative integer of a 'bits'-wide type looks like 1000...000
    # in base 2; in two's-complement limbs that is zero limbs followed by a
    # limb whose bits from (bits-1) % SHIFT upwards are set.
    digits = [NULLDIGIT] * ((bits - 1) // SHIFT)
    digits.append((-1 << ((bits - 1) % SHIFT)) & MASK)
    return digits

def _trimmed(digits):
    size = len(digits)
    while size and digits[size - 1] == NULLDIGIT:
        size -= 1
    return digits[:size]

def _x_mul(a, b):
    """
    Grade school multiplication of two magnitudes given as limb lists.
    """
    size_a = len(a)
    size_b = len(b)
    z = [NULLDIGIT] * (size_a + size_b + 1)
    for i in range(size_a):
        f = a[i]
        if not f:
            continue
        pz = i
        carry = 0
        for j in range(size_b):
            carry += z[pz] + f * b[j]
            z[pz] = carry & MASK
            carry >>= SHIFT
            pz += 1
        while carry:
            carry += z[pz]
            z[pz] = carry & MASK
            carry >>= SHIFT
            pz += 1
    return z

def _v_iadd(x, xofs, y):
    """
    Add the limbs of y into x, starting at limb xofs of x.  x must be long
    enough to hold the result.
    """
    carry = 0
    i = xofs
    for d in y:
        carry += x[i] + d
        x[i] = carry & MASK
        carry >>= SHIFT
        i += 1
    while carry:
        carry += x[i]
        x[i] = carry & MASK
        carry >>= SHIFT
        i += 1

def _v_isub(x, y):
    """
    Subtract the limbs of y from x in place; x >= y is required.
    """
    borrow = 0
    i = 0
    for d in y:
        borrow = x[i] - d - borrow
        x[i] = borrow & MASK
        borrow = 1 if borrow < 0 else 0
        i += 1
    while borrow:
        borrow = x[i] - borrow
        x[i] = borrow & MASK
        borrow = 1 if borrow < 0 else 0
        i += 1

def _v_add(a, b):
    if len(a) < len(b):
        a, b = b, a
    z = a + [NULLDIGIT]
    _v_iadd(z, 0, b)
    return _trimmed(z)

def _kmul_split(n, size):
    """
    Split the magnitude n at limb 'size' into (high, low) so that
    n == (high << size*SHIFT) + low.
    """
    return _trimmed(n[size:]), _trimmed(n[:size])

def _k_mul(a, b, cutoff):
    """
    Karatsuba multiplication of two magnitudes.  Ignores the input signs,
    and returns the absolute value of the product as a limb list.
    """
    if len(a) > len(b):
        a, b = b, a
    if len(a) <= cutoff:
        return _x_mul(a, b)

    shift = len(b) >> 1
    if len(a) <= shift:
        # a would have no high half
        return _k_lopsided_mul(a, b, cutoff)

    ah, al = _kmul_split(a, shift)
    bh, bl = _kmul_split(b, shift)

    t1 = _trimmed(_k_mul(ah, bh, cutoff))
    t2 = _trimmed(_k_mul(al, bl, cutoff))
    # (ah+al)*(bh+bl) - ah*bh - al*bl == ah*bl + al*bh
    t3 = _k_mul(_v_add(ah, al), _v_add(bh, bl), cutoff)
    _v_isub(t3, t1)
    _v_isub(t3, t2)
    t3 = _trimmed(t3)

    z = [NULLDIGIT] * (len(a) + len(b) + 1)
    _v_iadd(z, 0, t2)
    _v_iadd(z, shift, t3)
    _v_iadd(z, 2 * shift, t1)
    return z

def _k_lopsided_mul(a, b, cutoff):
    """
    Multiply a short magnitude a by a much longer b, one a-sized slice of
    b at a time.
    """
    size_a = len(a)
    z = [NULLDIGIT] * (size_a + len(b) + 1)
    nbdone = 0
    while nbdone < len(b):
        piece = _trimmed(b[nbdone:nbdone + size_a])
        product = _trimmed(_k_mul(a, piece, cutoff))
        _v_iadd(z, nbdone, product)
        nbdone += size_a
    return z

def _divrem(a, b):
    """ Long division with remainder, top-level routine """
    if b.is_zero():
        raise DivisionByZero()
    if a.is_zero():
        return bigint(), bigint()
    if b.is_minus_one():
        return a.neg(), bigint()
    if a.numdigits_abs() < b.numdigits_abs():
        # |a| < |b|
        return bigint(), a.copy()
    return _x_divrem(a, b)

def _x_divrem(a, b):
    """ Signed bigint division with remainder -- the algorithm """
    negative_rem = a._negative
    negative = a._negative != b._negative
    v = a.abs()
    w = b.abs()

    # normalize: shift w left so that its top limb has its top bit set,
    # and shift v left by the same amount
    d = SHIFT - w._digits[-1].bit_length()
    v.inplace_lshift(d)
    w.inplace_lshift(d)

    size_w = len(w._digits)
    k = len(v._digits) - size_w
    wtop = w._digits[-1]
    q = [NULLDIGIT] * (k + 1)
    multiplier = w.lshift(SHIFT * k)
    trace = _config.division.trace

    i = k
    while i >= 0:
        # estimate the quotient digit from the top limbs; it is never too
        # small, and too large by at most 2
        vv = (v.digit(size_w + i) << SHIFT) | v.digit(size_w + i - 1)
        qd = min(vv // wtop, MASK)
        estimate = qd
        if qd:
            v._inplace_subadd(multiplier.copy()._inplace_small_mul(qd), False)

        # add the multiplier back while the estimate was too large
        corrections = 0
        while v._negative:
            qd -= 1
            v._inplace_subadd(multiplier, True)
            corrections += 1

        division_stats.record(corrections)
        if trace:
            log.debug("digit %d: estimate 0x%08x, %d correction(s)" %
                      (i, estimate, corrections))
        q[i] = qd
        multiplier.inplace_rshift(SHIFT)
        i -= 1

    v.inplace_rshift(d)
    z = bigint(q)
    # The quotient z has the sign of a*b (zero stays non-negative);
    # the remainder v has the sign of a, so a = b*z + v.
    if negative:
        z.inplace_neg()
    if negative_rem:
        v.inplace_neg()
    return z, v

def _bitwise(a, op, b): # '&', '|', '^'
    """ Bitwise and/or/xor operations """
    size_z = max(len(a._digits), len(b._digits)) + 1
    digits = [NULLDIGIT] * size_z
    i = 0
    while i < size_z:
        diga = a.digit(i)
        digb = b.digit(i)
        if op == '&':
            digits[i] = diga & digb
        elif op == '|':
            digits[i] = diga | digb
        elif op == '^':
            digits[i] = diga ^ digb
        i += 1

    # the sign bits combine like any other bit position
    if op == '&':
        negative = a._negative and b._negative
    elif op == '|':
        negative = a._negative or b._negative
    else:
        negative = a._negative != b._negative
    return bigint(digits, negative)

def _hash(v):
    # This is designed so that Python ints and bigints with the same value
    # hash to the same value: hash(x) is |x| reduced modulo the hash modulus,
    # carrying the sign of x, and -1 is reserved for errors.
    modulus = sys.hash_info.modulus
    a = v.abs()
    x = 0
    for d in reversed(a._digits):
        x = ((x << SHIFT) | d) % modulus
    if v._negative:
        x = -x
    if x == -1:
        x = -2
    return x

#_________________________________________________________________

# decimal conversions

def _decimalstr_to_bigint(s):
    if not s or s == '-':
        raise InvalidFormat(s)
    negative = s[0] == '-'

    a = bigint()
    block = 0
    tens = 1
    for pos in range(int(negative), len(s)):
        c = s[pos]
        if c not in DECDIGITS:
            raise InvalidFormat(s, c, pos)
        block = block * 10 + DECDIGITS.index(c)
        tens *= 10
        if block > BLOCK_MAX or tens > TENS_MAX:
            # the next digit might not fit into a limb any more
            a._inplace_small_mul(tens)
            a._inplace_small_add(block, not negative)
            block = 0
            tens = 1
    if tens > 1:
        a._inplace_small_mul(tens)
        a._inplace_small_add(block, not negative)
    return a

def _format_decimal(x):
    if not x._digits:
        return "-1" if x._negative else "0"
    a = x.abs()
    chunks = []
    while a._digits:
        chunks.append("%09d" % a._inplace_divrem1(DEC_MAX))
    chunks.reverse()
    s = "".join(chunks).lstrip("0")
    if x._negative:
        s = "-" + s
    return s
