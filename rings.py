from abc import abstractmethod
import numbers

import groups
from errors import CoercionError, DivisionError
from registry import default_registry


class RingElement(groups.GroupElement):

    @property
    def ring(self):
        return self._group

    def _other_value(self, other):
        if isinstance(other, RingElement) and other.ring == self.ring:
            return other.value
        return self.ring.coerce(other)

    def __add__(self, other):
        return self.ring(self.ring.op_add(self.value, self._other_value(other)))

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        return self.ring(self.ring.op_sub(self.value, self._other_value(other)))

    def __rsub__(self, other):
        return self.ring(self.ring.op_sub(self._other_value(other), self.value))

    def __neg__(self):
        return self.ring(self.ring.op_neg(self.value))

    def __mul__(self, other):
        return self.ring(self.ring.op_mul(self.value, self._other_value(other)))

    def __rmul__(self, other):
        return self * other

    def __divmod__(self, other):
        q, r = self.ring.op_divrem(self.value, self._other_value(other))
        return self.ring(q), self.ring(r)

    def __floordiv__(self, other):
        return divmod(self, other)[0]

    def __mod__(self, other):
        return divmod(self, other)[1]

    def divexact(self, other):
        return self.ring(self.ring.op_divexact(self.value, self._other_value(other)))

    def inverse(self):
        return self.ring(self.ring.op_inv(self.value))

    def is_unit(self):
        return self.ring.is_unit(self.value)

    def is_zero(self):
        return self.ring.is_zero(self.value)

    def __int__(self):
        return int(self.value)

    def __eq__(self, other):
        if isinstance(other, RingElement):
            return other.ring == self.ring and other.value == self.value
        try:
            return self.value == self.ring.coerce(other)
        except CoercionError:
            return False

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return '<{}: {}>'.format(self.ring, self.value)


class Ring(groups.Group):
    '''
    Commutative ring with identity, given by operations on raw values.
    '''
    _op_mul = None
    _one = None

    def __init__(self, op_add, op_neg, op_mul, neutral, one, contains):
        super().__init__(op_add, op_neg, neutral, contains)
        self._op_mul = op_mul
        self._one = one

    def op_mul(self, x, y):
        return self._op_mul(x, y)

    @property
    def zero(self):
        return self.neutral

    @property
    def one(self):
        return self(self._one)

    @property
    def zero_value(self):
        return self._neutral

    @property
    def one_value(self):
        return self._one

    def is_zero(self, x):
        return x == self._neutral

    def __call__(self, x=None):
        if x is None:
            return RingElement(self._neutral, self)
        return RingElement(self.coerce(x), self)

    @abstractmethod
    def coerce(self, x):
        '''
        :return: the raw value of x in this ring; raises CoercionError.
        '''
        pass


class EuclideanRing(Ring):
    '''
    Ring with division with remainder.

    Subclasses supply op_divrem, the Euclidean norm, the unit test and a
    canonical unit for every element; gcd and extended gcd follow from those.
    '''

    @abstractmethod
    def op_divrem(self, x, y):
        '''
        :return: (q, r) with x == q * y + r and norm(r) < norm(y).
        '''
        pass

    @abstractmethod
    def norm(self, x):
        pass

    @abstractmethod
    def is_unit(self, x):
        pass

    @abstractmethod
    def op_inv(self, x):
        pass

    @abstractmethod
    def canonical_unit(self, x):
        '''
        :return: a unit u such that x / u is the normal associate of x.
        '''
        pass

    @abstractmethod
    def random_value(self, rng, bound=None):
        pass

    def op_divexact(self, x, y):
        q, r = self.op_divrem(x, y)
        if not self.is_zero(r):
            raise DivisionError('{} is not divisible by {} in {}'.format(x, y, self))
        return q

    def normalize(self, x):
        return self.op_mul(x, self.op_inv(self.canonical_unit(x)))

    def gcdx(self, x, y):
        '''
        :return: (g, s, t) with g the normalized gcd of x and y and
            s * x + t * y == g.
        '''
        r0, r1 = x, y
        s0, s1 = self._one, self._neutral
        t0, t1 = self._neutral, self._one
        while not self.is_zero(r1):
            q, r = self.op_divrem(r0, r1)
            r0, r1 = r1, r
            s0, s1 = s1, self.op_sub(s0, self.op_mul(q, s1))
            t0, t1 = t1, self.op_sub(t0, self.op_mul(q, t1))

        u = self.op_inv(self.canonical_unit(r0))
        return self.op_mul(r0, u), self.op_mul(s0, u), self.op_mul(t0, u)

    def gcd(self, x, y):
        return self.gcdx(x, y)[0]


class Integers(EuclideanRing):
    def __init__(self):
        super().__init__(
            op_add=lambda x, y: x + y,
            op_neg=lambda x: -x,
            op_mul=lambda x, y: x * y,
            neutral=0,
            one=1,
            contains=lambda x: isinstance(x, numbers.Integral)
        )

    def coerce(self, x):
        if isinstance(x, RingElement):
            if x.ring == self:
                return x.value
            raise CoercionError('{} cannot be coerced into {}'.format(x, self))

        if isinstance(x, numbers.Integral):
            return int(x)
        else:
            raise CoercionError('Not int value cannot be assigned to Integers')

    def op_divrem(self, x, y):
        if y == 0:
            raise DivisionError('Division by zero in {}'.format(self))
        q = x // y
        return q, x - q * y

    def norm(self, x):
        return abs(x)

    def is_unit(self, x):
        return x == 1 or x == -1

    def op_inv(self, x):
        if not self.is_unit(x):
            raise DivisionError('{} is not a unit in {}'.format(x, self))
        return x

    def canonical_unit(self, x):
        return -1 if x < 0 else 1

    def random_value(self, rng, bound=None):
        if bound is None:
            bound = 100
        return int(rng.integers(-bound, bound + 1))

    def __str__(self):
        return 'Z'

    def __repr__(self):
        return 'Integers()'

    def __eq__(self, other):
        return isinstance(other, Integers)

    def __hash__(self):
        return hash(Integers)


def is_prime(n):
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


class FiniteField(EuclideanRing):
    _modulo = None

    def __init__(self, modulo):
        if not (isinstance(modulo, numbers.Integral) and is_prime(modulo)):
            raise ValueError('Finite field modulus must be prime, got {}'.format(modulo))
        modulo = int(modulo)
        self._modulo = modulo

        super().__init__(
            op_add=lambda x, y: (x + y) % modulo,
            op_neg=lambda x: (-x) % modulo,
            op_mul=lambda x, y: (x * y) % modulo,
            neutral=0,
            one=1,
            contains=lambda x: isinstance(x, numbers.Integral)
        )

    @property
    def modulo(self):
        return self._modulo

    def coerce(self, x):
        if isinstance(x, RingElement):
            if x.ring == self or isinstance(x.ring, Integers):
                a = x.value
            else:
                raise CoercionError('{} cannot be coerced into {}'.format(x, self))
        else:
            a = x

        if isinstance(a, numbers.Integral):
            return int(a) % self._modulo
        else:
            raise CoercionError('Not int value cannot be assigned to {}'.format(self))

    def op_divrem(self, x, y):
        return self.op_mul(x, self.op_inv(y)), 0

    def norm(self, x):
        return 0 if x == 0 else 1

    def is_unit(self, x):
        return x != 0

    def op_inv(self, x):
        if x == 0:
            raise DivisionError('Division by zero in {}'.format(self))
        return pow(x, -1, self._modulo)

    def canonical_unit(self, x):
        return x if x != 0 else 1

    def random_value(self, rng, bound=None):
        return int(rng.integers(0, self._modulo))

    def __str__(self):
        return 'GF({})'.format(self._modulo)

    def __repr__(self):
        return 'FiniteField({})'.format(self._modulo)

    def __eq__(self, other):
        return isinstance(other, FiniteField) and self._modulo == other._modulo

    def __hash__(self):
        return hash((FiniteField, self._modulo))


def GF(modulo, cached=None, registry=None):
    '''
    Build the prime field of the given order, reusing the registered one
    unless cached is False.
    '''
    if registry is None:
        registry = default_registry
    return registry.get_or_create(
        ('FiniteField', modulo), lambda: FiniteField(modulo), cached=cached)


ZZ = Integers()
