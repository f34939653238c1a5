from collections import namedtuple

CulledPresentation = namedtuple('CulledPresentation', ['gen_cols', 'culled', 'pivots'])


def cull_matrix(A):
    '''
    Find the relations of a reduced relation matrix that only express a
    generator in terms of the others (unit pivot), so that the relation and
    the generator can both be removed.

    :param A: a matrix in reduced form; trailing zero rows are ignored.
    :return: CulledPresentation(gen_cols, culled, pivots) where gen_cols are
        the surviving generator columns, culled the indices of removable rows
        and pivots[k] the pivot column of the k-th surviving row.
    '''
    R = A.ring
    nrels = A.nrows
    while nrels > 0 and A.is_zero_row(nrels - 1):
        nrels -= 1

    gen_cols = []
    culled = []
    pivots = []
    kept = []
    col = 0
    for i in range(nrels):
        while R.is_zero(A[i, col]):
            gen_cols.append(col)
            col += 1
        if R.is_unit(A[i, col]):
            culled.append(i)
        else:
            kept.append(i)
            gen_cols.append(col)
            pivots.append(col)
        col += 1
    gen_cols.extend(range(col, A.ncols))

    # a single remaining relation can go if any later entry is a unit
    if len(kept) == 1:
        row = kept[0]
        for k in range(gen_cols.index(pivots[0]) + 1, len(gen_cols)):
            if R.is_unit(A[row, gen_cols[k]]):
                culled.append(row)
                culled.sort()
                pivots.pop()
                del gen_cols[k]
                break

    return CulledPresentation(gen_cols, culled, pivots)
