import pytest

from ancestry import (compatible, depth, embedding_map, is_submodule, lift_element,
                      lift_generators, supermodule)
from errors import CoercionError, IncompatibleModulesError
from matrices import Matrix
from modules import FreeModule, Submodule
from rings import ZZ


@pytest.fixture
def A2(A):
    return Submodule(A, [[1, 1]])


class TestCompatible:

    @pytest.mark.invariant
    def test_reflexive(self, F, A, A2):
        for M in (F, A, A2):
            flag, P = compatible(M, M)
            assert flag
            assert P is M

    @pytest.mark.invariant
    def test_symmetric(self, F, A, B, A2):
        for M, N in [(A, B), (A2, B), (A2, A), (F, A2)]:
            flag1, P1 = compatible(M, N)
            flag2, P2 = compatible(N, M)
            assert flag1 and flag2
            assert P1 is P2

    def test_deepest_common_ancestor(self, F, A, B, A2):
        assert compatible(A, B)[1] is F
        assert compatible(A2, B)[1] is F
        assert compatible(A2, A)[1] is A
        assert compatible(Submodule(A, [[1, 0]]), A2)[1] is A

    def test_independent_ambients(self, F, A):
        G = FreeModule(ZZ, 2, cached=False)
        assert compatible(F, G) == (False, None)
        assert compatible(A, Submodule(G, [[1, 0]])) == (False, None)


class TestIsSubmodule:

    def test_submodule_membership(self, F, A):
        assert is_submodule(F, A)
        assert not is_submodule(A, F)
        assert is_submodule(F, F)

    @pytest.mark.invariant
    def test_transitive(self, F, A, A2):
        assert is_submodule(A, A2)
        assert is_submodule(F, A2)

    def test_siblings_are_unrelated(self, A, B, A2):
        assert not is_submodule(B, A2)
        assert not is_submodule(A, B)


class TestLifting:

    def test_supermodule(self, F, A):
        assert supermodule(A) is F
        with pytest.raises(CoercionError):
            supermodule(F)

    def test_depth(self, F, A, A2):
        assert [depth(M) for M in (F, A, A2)] == [0, 1, 2]

    def test_lift_generators(self, F, A, A2):
        assert lift_generators(A2, F) == [F([2, 4])]
        assert lift_generators(A2, A) == [A([1, 1])]
        assert lift_generators(A, A) == A.gens()

    def test_lift_element(self, F, A2):
        assert lift_element(3 * A2.gens()[0], F) == F([6, 12])

    def test_lift_to_non_ancestor(self, A, B):
        with pytest.raises(IncompatibleModulesError):
            lift_generators(A, B)

    def test_embedding_map(self, F, A2):
        f = embedding_map(A2, F)
        assert f.matrix == Matrix(ZZ, [[2, 4]])
        assert f(A2.gens()[0]) == F([2, 4])
        assert embedding_map(F, F)(F([1, 2])) == F([1, 2])
