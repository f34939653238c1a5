from errors import IncompatibleDimensionsError, IncompatibleModulesError
from matrices import Matrix, identity_matrix


class ModuleHomomorphism(object):
    '''
    Ring-linear map between finitely presented modules, acting on row
    vectors: the image of generator i of src is row i of the matrix, written
    in the generators of dst.
    '''
    _src_module = None
    _dst_module = None
    _matrix = None

    def __init__(self, src_module, dst_module, matrix):
        if not isinstance(matrix, Matrix):
            matrix = Matrix(src_module.base_ring, matrix, dst_module.ngens())
        if matrix.shape != (src_module.ngens(), dst_module.ngens()):
            raise IncompatibleDimensionsError(
                'A map from {} to {} needs a {}x{} matrix, not {}x{}.'.format(
                    src_module, dst_module, src_module.ngens(), dst_module.ngens(), *matrix.shape))
        self._src_module = src_module
        self._dst_module = dst_module
        self._matrix = matrix

    def __call__(self, arg):
        x = self.src(arg)
        R = self.src.base_ring
        M = self._matrix
        y = []
        for k in range(M.ncols):
            acc = R.zero_value
            for j, c in enumerate(x.coords):
                if not R.is_zero(c):
                    acc = R.op_add(acc, R.op_mul(c, M[j, k]))
            y.append(acc)
        return self.dst(y)

    @property
    def src(self):
        return self._src_module

    @property
    def dst(self):
        return self._dst_module

    @property
    def matrix(self):
        return self._matrix

    def image_of_gens(self):
        return [self.dst(self._matrix.row(i)) for i in range(self._matrix.nrows)]

    def __mul__(self, other):
        # (self * other)(x) == self(other(x))
        if not isinstance(other, ModuleHomomorphism):
            return NotImplemented
        if other.dst is not self.src:
            raise IncompatibleModulesError('Only maps with matching modules can be composed.')
        return ModuleHomomorphism(other.src, self.dst, other.matrix * self.matrix)

    def __str__(self):
        return '<Module homomorphism: {} --> {}: {}>'.format(self.src, self.dst, self._matrix)

    __repr__ = __str__


def identity_map(module):
    return ModuleHomomorphism(module, module, identity_matrix(module.base_ring, module.ngens()))
