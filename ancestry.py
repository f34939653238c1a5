from errors import CoercionError, IncompatibleModulesError
from module_maps import identity_map
from modules import Submodule


def supermodule(M):
    if isinstance(M, Submodule):
        return M.parent
    raise CoercionError('{} is an ambient module and has no supermodule.'.format(M))


def compatible(M, N):
    '''
    Test whether M and N are (transitively) submodules of a common module.

    The parent chain of N is walked once for every module in the chain of M,
    so the first match is the deepest common ancestor.

    :return: (True, P) with P the common ancestor, or (False, None).
    '''
    M1 = M
    M2 = N
    while isinstance(M1, Submodule):
        M2 = N
        while isinstance(M2, Submodule):
            if M1 is M2:
                return True, M1
            M2 = M2.parent
        M1 = M1.parent
    while isinstance(M2, Submodule):
        M2 = M2.parent
    if M1 is M2:
        return True, M1
    return False, None


def is_submodule(M, N):
    '''
    Test whether N was built as a submodule of M, transitively. M counts as
    a submodule of itself.
    '''
    if M is N:
        return True
    while isinstance(N, Submodule):
        N = N.parent
        if M is N:
            return True
    return False


def depth(M):
    d = 0
    while isinstance(M, Submodule):
        M = M.parent
        d += 1
    return d


def lift_generators(M, P):
    '''
    Rewrite the generators of M as elements of its ancestor P.
    '''
    G = M.gens()
    M1 = M
    while M1 is not P:
        if not isinstance(M1, Submodule):
            raise IncompatibleModulesError('{} is not an ancestor of {}'.format(P, M))
        G = [M1.embed(v) for v in G]
        M1 = M1.parent
    return G


def lift_element(x, P):
    M1 = x.parent
    while M1 is not P:
        if not isinstance(M1, Submodule):
            raise IncompatibleModulesError('{} is not an ancestor of {}'.format(P, x.parent))
        x = M1.embed(x)
        M1 = M1.parent
    return x


def embedding_map(M, P):
    '''
    Composite of the embeddings along the chain from M up to its ancestor P.
    '''
    f = identity_map(M)
    M1 = M
    while M1 is not P:
        if not isinstance(M1, Submodule):
            raise IncompatibleModulesError('{} is not an ancestor of {}'.format(P, M))
        f = M1.embed * f
        M1 = M1.parent
    return f
