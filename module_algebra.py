import logging

from ancestry import compatible, depth, lift_element, lift_generators
from errors import IncompatibleModulesError
from matrices import Matrix, can_solve_left_reduced_triu, left_kernel, reduced_form, vstack
from modules import Submodule

logger = logging.getLogger(__name__)


def _common_ancestor(M, N):
    flag, P = compatible(M, N)
    if not flag:
        raise IncompatibleModulesError('Modules not compatible: {} and {}'.format(M, N))
    logger.debug('Common ancestor %s found at depth %d', P, depth(P))
    return P


def _gens_matrix(P, G):
    return Matrix(P.base_ring, [g.coords for g in G], P.ngens())


def intersect(M, N):
    '''
    Intersection of two compatible modules, built as a submodule of M.

    A relation between the generators of M and N (and the relations of
    their common ancestor P) says that a combination of the generators of M
    equals a combination of the generators of N in P, so the M part of
    every left kernel vector gives a generator of the intersection.
    '''
    P = _common_ancestor(M, N)
    G1 = lift_generators(M, P)
    G2 = lift_generators(N, P)
    r1, r2, r3 = len(G1), len(G2), P.rels().nrows
    rn = r1 + r2 + r3

    # Rows are flipped so that the M block comes first for the kernel
    # computation; the kernel is flipped back below.
    stacked = vstack(P.rels(), _gens_matrix(P, G2), _gens_matrix(P, G1)).reverse_rows()
    nullity, K = left_kernel(stacked)
    logger.debug('Intersection matrix %dx%d has nullity %d', stacked.nrows, stacked.ncols, nullity)

    K = K.reverse_rows().reverse_columns()
    I = [M([K[j, rn - r1 + i] for i in range(r1)]) for j in range(nullity)]
    return Submodule(M, I)


def equal(M, N):
    '''
    Structural equality of two compatible modules: each one is contained in
    the other once both are written in their common ancestor.
    '''
    P = _common_ancestor(M, N)
    G1 = lift_generators(M, P)
    G2 = lift_generators(N, P)

    mat1 = reduced_form(vstack(_gens_matrix(P, G1), P.rels()))
    mat2 = reduced_form(vstack(_gens_matrix(P, G2), P.rels()))

    for v in G1:
        flag, _ = can_solve_left_reduced_triu(v.coords, mat2)
        if not flag:
            return False
    for v in G2:
        flag, _ = can_solve_left_reduced_triu(v.coords, mat1)
        if not flag:
            return False
    return True


def contains(M, x):
    '''
    Test whether the element x, of a module compatible with M, lies in M.
    '''
    P = _common_ancestor(M, x.parent)
    v = lift_element(x, P)
    mat = reduced_form(vstack(_gens_matrix(P, lift_generators(M, P)), P.rels()))
    flag, _ = can_solve_left_reduced_triu(v.coords, mat)
    return flag
