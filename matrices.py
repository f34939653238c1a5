import numpy as np

from errors import IncompatibleDimensionsError


class Matrix(object):
    '''
    Dense matrix over a Euclidean ring.

    Entries are raw ring values kept in a numpy object array. A Matrix is not
    modified once built; every operation returns a new one.
    '''
    _ring = None
    _data = None

    def __init__(self, ring, rows=(), ncols=None):
        if isinstance(rows, Matrix):
            rows = rows.rows()
        rows = [list(row) for row in rows]
        if ncols is None:
            ncols = len(rows[0]) if rows else 0

        self._ring = ring
        self._data = np.empty((len(rows), ncols), dtype=object)
        for i, row in enumerate(rows):
            if len(row) != ncols:
                raise IncompatibleDimensionsError(
                    'Row {} has {} entries instead of {}.'.format(i, len(row), ncols))
            for j, x in enumerate(row):
                self._data[i, j] = ring.coerce(x)

    @classmethod
    def from_array(cls, ring, array):
        '''
        Wrap an object array of raw values of ring without coercing them.
        '''
        result = cls.__new__(cls)
        result._ring = ring
        result._data = np.array(array, dtype=object).reshape(np.shape(array))
        return result

    @property
    def ring(self):
        return self._ring

    @property
    def nrows(self):
        return self._data.shape[0]

    @property
    def ncols(self):
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def __getitem__(self, index):
        i, j = index
        return self._data[i, j]

    def row(self, i):
        return tuple(self._data[i, :])

    def rows(self):
        return [self.row(i) for i in range(self.nrows)]

    def to_array(self):
        return self._data.copy()

    def is_zero_row(self, i):
        return all(self._ring.is_zero(x) for x in self._data[i, :])

    def is_zero(self):
        return all(self.is_zero_row(i) for i in range(self.nrows))

    def submatrix(self, row_slice=slice(None), col_slice=slice(None)):
        return Matrix.from_array(self._ring, self._data[row_slice, col_slice])

    def reverse_rows(self):
        return Matrix.from_array(self._ring, self._data[::-1, :])

    def reverse_columns(self):
        return Matrix.from_array(self._ring, self._data[:, ::-1])

    @property
    def T(self):
        return Matrix.from_array(self._ring, self._data.T)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.ncols != other.nrows:
            raise IncompatibleDimensionsError(
                'Cannot multiply {}x{} and {}x{} matrices.'.format(*(self.shape + other.shape)))

        R = self._ring
        result = np.empty((self.nrows, other.ncols), dtype=object)
        for i in range(self.nrows):
            for k in range(other.ncols):
                acc = R.zero_value
                for j in range(self.ncols):
                    acc = R.op_add(acc, R.op_mul(self._data[i, j], other._data[j, k]))
                result[i, k] = acc
        return Matrix.from_array(R, result)

    def __eq__(self, other):
        return (isinstance(other, Matrix) and self._ring == other._ring and
                self.shape == other.shape and
                all(x == y for x, y in zip(self._data.flat, other._data.flat)))

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __str__(self):
        return '[{}]'.format('; '.join(' '.join(str(x) for x in row) for row in self.rows()))

    def __repr__(self):
        return '<Matrix {}x{} over {}: {}>'.format(self.nrows, self.ncols, self._ring, self)


def zero_matrix(ring, nrows, ncols):
    return Matrix(ring, [[ring.zero_value] * ncols for _ in range(nrows)], ncols)


def identity_matrix(ring, n):
    return Matrix(ring, [[ring.one_value if i == j else ring.zero_value for j in range(n)]
                         for i in range(n)], n)


def vstack(*matrices):
    '''
    Stack matrices with the same number of columns on top of each other.
    '''
    if not matrices:
        raise ValueError('vstack needs at least one matrix')
    ring = matrices[0].ring
    ncols = matrices[0].ncols
    if any(M.ncols != ncols for M in matrices):
        raise IncompatibleDimensionsError('Only matrices with the same number of columns can be stacked.')
    rows = []
    for M in matrices:
        rows.extend(M.rows())
    return Matrix(ring, rows, ncols)


def pivot_column(ring, row):
    for j, x in enumerate(row):
        if not ring.is_zero(x):
            return j
    return None


def _row_submul(ring, target, source, q, start=0):
    # target -= q * source, in place
    for j in range(start, len(target)):
        if not ring.is_zero(source[j]):
            target[j] = ring.op_sub(target[j], ring.op_mul(q, source[j]))


def _echelonize(ring, rows, ncols):
    '''
    Bring the list of rows (lists of raw values) into reduced form in place.

    :return: the number of nonzero rows.
    '''
    m = len(rows)
    r = 0
    for c in range(ncols):
        if r == m:
            break

        while True:
            candidates = [i for i in range(r, m) if not ring.is_zero(rows[i][c])]
            if not candidates:
                break
            best = min(candidates, key=lambda i: ring.norm(rows[i][c]))
            rows[r], rows[best] = rows[best], rows[r]

            cleared = True
            for i in range(r + 1, m):
                if not ring.is_zero(rows[i][c]):
                    q, _ = ring.op_divrem(rows[i][c], rows[r][c])
                    _row_submul(ring, rows[i], rows[r], q, c)
                    if not ring.is_zero(rows[i][c]):
                        cleared = False
            if cleared:
                break

        if ring.is_zero(rows[r][c]):
            continue

        u = ring.op_inv(ring.canonical_unit(rows[r][c]))
        rows[r] = [ring.op_mul(x, u) for x in rows[r]]

        for i in range(r):
            if not ring.is_zero(rows[i][c]):
                q, _ = ring.op_divrem(rows[i][c], rows[r][c])
                _row_submul(ring, rows[i], rows[r], q, c)
        r += 1
    return r


def reduced_form(A):
    '''
    Canonical reduced upper triangular form of A (Hermite normal form over
    the integers, reduced row echelon form over a field).

    The shape is kept and zero rows are moved to the bottom. Pivots are
    normalized and the entries above each pivot are reduced modulo it.
    '''
    rows = [list(row) for row in A.rows()]
    _echelonize(A.ring, rows, A.ncols)
    return Matrix(A.ring, rows, A.ncols)


def strip_zero_rows(A):
    return Matrix(A.ring, [A.row(i) for i in range(A.nrows) if not A.is_zero_row(i)], A.ncols)


def left_kernel(A):
    '''
    Basis of the left kernel {v : v * A == 0}.

    :return: (nullity, K) with K a nullity x nrows(A) matrix in reduced form.
    '''
    R = A.ring
    m, n = A.shape
    rows = [list(A.row(i)) + [R.one_value if i == j else R.zero_value for j in range(m)]
            for i in range(m)]
    _echelonize(R, rows, n + m)

    rank = 0
    while rank < m and pivot_column(R, rows[rank][:n]) is not None:
        rank += 1
    kernel = [row[n:] for row in rows[rank:]]
    return m - rank, Matrix(R, kernel, m)


def can_solve_left_reduced_triu(v, T):
    '''
    Decide whether the row vector v lies in the row space of T, where T is
    in reduced form.

    :param v: a sequence of ring values or a 1 x ncols(T) matrix.
    :return: (True, x) with x a 1 x nrows(T) matrix such that x * T == v, or
        (False, None).
    '''
    R = T.ring
    if isinstance(v, Matrix):
        v = v.row(0)
    v = [R.coerce(x) for x in v]
    if len(v) != T.ncols:
        raise IncompatibleDimensionsError(
            'Vector of length {} against a matrix with {} columns.'.format(len(v), T.ncols))

    x = [R.zero_value] * T.nrows
    col = 0
    for i in range(T.nrows):
        row = T.row(i)
        p = pivot_column(R, row)
        if p is None:
            break
        if any(not R.is_zero(v[j]) for j in range(col, p)):
            return False, None
        q, r = R.op_divrem(v[p], row[p])
        if not R.is_zero(r):
            return False, None
        x[i] = q
        _row_submul(R, v, row, q, p)
        col = p + 1

    if any(not R.is_zero(v[j]) for j in range(col, T.ncols)):
        return False, None
    return True, Matrix(R, [x], T.nrows)


def reduce_mod_rows(v, T):
    '''
    Canonical representative of the row vector v modulo the row space of the
    reduced matrix T.
    '''
    R = T.ring
    v = [R.coerce(x) for x in v]
    for i in range(T.nrows):
        row = T.row(i)
        p = pivot_column(R, row)
        if p is None:
            break
        if not R.is_zero(v[p]):
            q, _ = R.op_divrem(v[p], row[p])
            _row_submul(R, v, row, q, p)
    return tuple(v)
