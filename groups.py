from abc import abstractmethod


class GroupElement(object):
    _value = None
    _group = None

    def __init__(self, value, group):
        self._value = value
        self._group = group

    @property
    def value(self):
        return self._value

    @property
    def group(self):
        return self._group

    def _check_same_group(self, other):
        if not (isinstance(other, GroupElement) and other.group is self.group):
            raise ValueError('Only instances of GroupElement with the same group can be operated.')

    def __add__(self, other):
        self._check_same_group(other)
        return self.group(self.group.op_add(self.value, other.value))

    def __neg__(self):
        return self.group(self.group.op_neg(self.value))

    def __sub__(self, other):
        self._check_same_group(other)
        return self.group(self.group.op_sub(self.value, other.value))

    def __str__(self):
        return str(self._value)

    def __eq__(self, other):
        return (isinstance(other, GroupElement) and other.group is self.group and
                self.value == other.value)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((id(self._group), self._value))


class Group(object):
    '''
    Additive abelian group given by operations on raw values.

    The op_* methods take and return raw values; calling the group wraps a
    raw value into an element.
    '''
    _op_add = None
    _op_neg = None
    _neutral = None
    _contains = None

    def __init__(self, op_add, op_neg, neutral, contains):
        self._op_add = op_add
        self._op_neg = op_neg
        self._neutral = neutral
        self._contains = contains

    def op_add(self, x, y):
        return self._op_add(x, y)

    def op_neg(self, x):
        return self._op_neg(x)

    def op_sub(self, x, y):
        return self._op_add(x, self._op_neg(y))

    @property
    def neutral(self):
        return self(self._neutral)

    def __contains__(self, x):
        if isinstance(x, GroupElement):
            return x.group is self
        else:
            return self._contains(x)

    @abstractmethod
    def __call__(self, x):
        pass
