import logging
import numbers

import numpy as np

import groups
from errors import CoercionError, IncompatibleDimensionsError, IncompatibleModulesError
from matrices import (Matrix, left_kernel, reduce_mod_rows, reduced_form,
                      strip_zero_rows, vstack, zero_matrix)
from module_maps import ModuleHomomorphism
from registry import default_registry

logger = logging.getLogger(__name__)


class ModuleElement(groups.GroupElement):
    '''
    Element of a finitely presented module, stored as its coordinates with
    respect to the generators of the module. Coordinates are always reduced
    modulo the relations, so equal elements have equal coordinates.
    '''

    @property
    def parent(self):
        return self._group

    @property
    def coords(self):
        return self._value

    def _check_same_module(self, other):
        if not isinstance(other, ModuleElement):
            raise TypeError('Only module elements can be added to module elements.')
        if other.parent is not self.parent:
            raise IncompatibleModulesError('Elements of different modules cannot be operated.')

    def __add__(self, other):
        self._check_same_module(other)
        return self.parent(self.parent.op_add(self.coords, other.coords))

    def __sub__(self, other):
        self._check_same_module(other)
        return self.parent(self.parent.op_sub(self.coords, other.coords))

    def __mul__(self, other):
        R = self.parent.base_ring
        c = R.coerce(other)
        return self.parent(tuple(R.op_mul(c, x) for x in self.coords))

    def __rmul__(self, other):
        return self * other

    def __getitem__(self, i):
        return self._value[i]

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def is_zero(self):
        R = self.parent.base_ring
        return all(R.is_zero(x) for x in self._value)

    def vector(self):
        return Matrix(self.parent.base_ring, [self._value], len(self._value))

    def __eq__(self, other):
        return (isinstance(other, ModuleElement) and other.parent is self.parent and
                other.coords == self.coords)

    def __hash__(self):
        return hash((id(self._group), self._value))

    def __str__(self):
        return '({})'.format(', '.join(str(x) for x in self._value))

    def __repr__(self):
        return '<ModuleElement: {}>'.format(self)


class FPModule(groups.Group):
    '''
    Finitely presented module over a Euclidean ring: ngens generators subject
    to the rows of a relation matrix kept in reduced form without zero rows.

    Modules are immutable and compare by identity; see module_algebra.equal
    for structural equality.
    '''
    _base_ring = None
    _ngens = 0
    _rels = None

    def __init__(self, ring, ngens, rels):
        R = ring
        super().__init__(
            op_add=lambda x, y: tuple(R.op_add(a, b) for a, b in zip(x, y)),
            op_neg=lambda x: tuple(R.op_neg(a) for a in x),
            neutral=(R.zero_value,) * ngens,
            contains=lambda x: (not isinstance(x, (str, bytes)) and len(x) == ngens and
                                all(a in R for a in x))
        )
        self._base_ring = ring
        self._ngens = ngens
        self._rels = rels

    @property
    def base_ring(self):
        return self._base_ring

    def ngens(self):
        return self._ngens

    def rels(self):
        return self._rels

    def zero(self):
        return self.neutral

    def gens(self):
        R = self._base_ring
        return [self([R.one_value if i == j else R.zero_value for j in range(self._ngens)])
                for i in range(self._ngens)]

    def __call__(self, x=None):
        if x is None:
            return ModuleElement(self._neutral, self)

        if isinstance(x, ModuleElement):
            elem = x
            while elem.parent is not self:
                if not isinstance(elem.parent, Submodule):
                    raise CoercionError('{} is not an element of {} or of one of its submodules.'.format(x, self))
                elem = elem.parent.embed(elem)
            return elem

        if isinstance(x, (str, bytes, numbers.Number)):
            raise CoercionError('{!r} cannot be coerced into {}'.format(x, self))
        coords = list(x)
        if len(coords) != self._ngens:
            raise IncompatibleDimensionsError(
                '{} coordinates given for a module with {} generators.'.format(len(coords), self._ngens))
        R = self._base_ring
        return ModuleElement(reduce_mod_rows([R.coerce(a) for a in coords], self._rels), self)

    def __str__(self):
        return '{} over {} with {} generator{} and {} relation{}'.format(
            self.__class__.__name__, self._base_ring, self._ngens, '' if self._ngens == 1 else 's',
            self._rels.nrows, '' if self._rels.nrows == 1 else 's')

    def __repr__(self):
        return '<{}>'.format(self)


class AmbientModule(FPModule):
    '''
    Root of a submodule tree: a free module of the given rank, or the
    quotient of one by user supplied relations.
    '''

    def __init__(self, ring, rank, rels=None):
        if rels is None:
            relation_matrix = zero_matrix(ring, 0, rank)
        else:
            relation_matrix = strip_zero_rows(reduced_form(Matrix(ring, rels, rank)))
        super().__init__(ring, rank, relation_matrix)

    @property
    def rank(self):
        return self._ngens


def FreeModule(ring, rank, cached=None, registry=None):
    '''
    Free module ring^rank. Repeated calls return the same module unless
    cached is False.
    '''
    if registry is None:
        registry = default_registry
    return registry.get_or_create(('FreeModule', ring, rank), lambda: AmbientModule(ring, rank), cached=cached)


class Submodule(FPModule):
    '''
    Submodule of parent spanned by gens, a list of elements (or coordinate
    vectors) of parent.

    The relations are the combinations of the generators that vanish in
    parent, and embed sends generator i to gens[i].
    '''
    _parent = None
    _gens_in_parent = ()
    _embed = None

    def __init__(self, parent, gens):
        gens = [parent(g) for g in gens]
        R = parent.base_ring
        k = len(gens)
        G = Matrix(R, [g.coords for g in gens], parent.ngens())

        if k:
            nullity, K = left_kernel(vstack(G, parent.rels()))
            relation_matrix = strip_zero_rows(reduced_form(K.submatrix(col_slice=slice(0, k))))
        else:
            relation_matrix = zero_matrix(R, 0, 0)

        super().__init__(R, k, relation_matrix)
        self._parent = parent
        self._gens_in_parent = tuple(gens)
        self._embed = ModuleHomomorphism(self, parent, G)
        logger.debug('Submodule with %d generators and %d relations built in %s',
                     k, relation_matrix.nrows, parent)

    @property
    def parent(self):
        return self._parent

    @property
    def embed(self):
        return self._embed

    def generators_in_parent(self):
        return list(self._gens_in_parent)


def submodule(parent, gens):
    '''
    :return: the submodule of parent spanned by gens, and its embedding map.
    '''
    S = Submodule(parent, gens)
    return S, S.embed


def zero(M):
    return M.zero()


def rels(M):
    return M.rels()


def ngens(M):
    return M.ngens()


def gens(M):
    return M.gens()


def random_element(M, bound=None, rng=None):
    '''
    Random element of M whose coordinates are drawn by the base ring.

    :param bound: size bound passed to the ring (absolute value over Z).
    :param rng: a numpy Generator; a fresh default one is used when omitted.
    '''
    if rng is None:
        rng = np.random.default_rng()
    R = M.base_ring
    return M([R.random_value(rng, bound) for _ in range(M.ngens())])
