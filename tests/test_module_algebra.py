import pytest

from ancestry import is_submodule
from errors import IncompatibleModulesError
from module_algebra import contains, equal, intersect
from modules import AmbientModule, FreeModule, Submodule, ngens, random_element
from rings import ZZ


def random_submodule(M, rng, count=2, bound=6):
    return Submodule(M, [random_element(M, bound, rng) for _ in range(count)])


class TestIntersect:

    def test_lattices_in_the_plane(self, F, A, B):
        I = intersect(A, B)
        assert is_submodule(A, I)
        assert equal(I, Submodule(F, [[6, 0], [0, 12]]))
        assert not equal(A, B)

    def test_intersection_is_symmetric_up_to_equality(self, A, B):
        assert equal(intersect(A, B), intersect(B, A))

    def test_nested_modules(self, F, A):
        A2 = Submodule(A, [[1, 1]])
        assert equal(intersect(A, A2), A2)
        assert equal(intersect(A2, F), A2)

    def test_torsion_ambient(self):
        Q = AmbientModule(ZZ, 1, rels=[[6]])
        S2 = Submodule(Q, [[2]])
        S3 = Submodule(Q, [[3]])
        assert equal(intersect(S2, S3), Submodule(Q, []))
        assert equal(intersect(S2, Submodule(Q, [[4]])), S2)

    def test_over_a_field(self, F7):
        V = FreeModule(F7, 2, cached=False)
        L = Submodule(V, [[1, 2]])
        assert equal(intersect(L, Submodule(V, [[2, 4]])), L)
        assert equal(intersect(L, Submodule(V, [[0, 1]])), Submodule(V, []))

    def test_incompatible_modules(self, F, A):
        G = FreeModule(ZZ, 2, cached=False)
        with pytest.raises(IncompatibleModulesError):
            intersect(A, G)
        with pytest.raises(IncompatibleModulesError):
            intersect(F, Submodule(G, [[1, 0]]))

    @pytest.mark.invariant
    def test_self_intersection(self, F, A):
        Q = AmbientModule(ZZ, 2, rels=[[4, 2]])
        for M in (F, A, Q, Submodule(Q, [[1, 1], [2, 0]])):
            assert equal(intersect(M, M), M)

    @pytest.mark.invariant
    def test_random_intersections_lie_in_both(self, F, rng):
        for _ in range(5):
            M = random_submodule(F, rng)
            N = random_submodule(F, rng, count=3)
            I = intersect(M, N)
            assert equal(intersect(M, M), M)
            for g in I.gens():
                assert contains(M, g)
                assert contains(N, g)


class TestEqual:

    def test_different_generators_same_module(self, F):
        S1 = Submodule(F, [[2, 0], [0, 4]])
        S2 = Submodule(F, [[2, 4], [0, 4]])
        S3 = Submodule(F, [[2, 0], [0, 4], [2, 4]])
        assert equal(S1, S2)
        assert equal(S2, S3)

    def test_module_equals_itself(self, F, A):
        assert equal(F, F)
        assert equal(A, A)

    def test_proper_submodule(self, F, A):
        assert not equal(F, A)
        assert equal(F, Submodule(F, [[1, 0], [0, 1]]))
        assert equal(F, Submodule(F, [[2, 1], [1, 1]]))

    def test_relations_of_the_ancestor_count(self):
        Q = AmbientModule(ZZ, 1, rels=[[6]])
        assert equal(Submodule(Q, [[2]]), Submodule(Q, [[8]]))
        assert equal(Submodule(Q, [[6]]), Submodule(Q, []))
        assert equal(Submodule(Q, [[5]]), Q)

    def test_incompatible_modules(self, F):
        G = FreeModule(ZZ, 2, cached=False)
        with pytest.raises(IncompatibleModulesError):
            equal(F, G)


class TestContains:

    def test_membership(self, F, A, B):
        assert contains(A, F([4, 8]))
        assert not contains(A, F([2, 2]))
        assert not contains(A, B.gens()[0])
        assert contains(F, B.gens()[0])

    def test_element_of_a_submodule(self, A):
        A2 = Submodule(A, [[1, 1]])
        assert contains(A, A2.gens()[0])
        assert ngens(A2) == 1

    def test_incompatible_element(self, A):
        G = FreeModule(ZZ, 2, cached=False)
        with pytest.raises(IncompatibleModulesError):
            contains(A, G([1, 0]))
