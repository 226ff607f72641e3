from booleanomial.utilities.exceptions import InvalidTermCountException, OutOfRangeException

# Bit `k` of a term-index is set iff variable `k` appears in the term.
# Variables never appear squared (x^2 = x for boolean x), so a term is fully
# described by the subset of variables it contains.

MAX_VARIABLES  = 8
MAX_TERM_COUNT = 1 << MAX_VARIABLES


def check_term_count(term_count: int) -> int:
    """
    Ensures `term_count` is a power of two in [1, MAX_TERM_COUNT].

    Parameters:
        term_count (int): Number of terms.

    Returns:
        int: `term_count`, unchanged.
    """
    if type(term_count) is not int or term_count < 1 or term_count > MAX_TERM_COUNT or term_count & (term_count - 1):
        raise InvalidTermCountException(f'Term count must be a power of two between 1 and {MAX_TERM_COUNT}, got {term_count!r}')

    return term_count


def variable_count(term_count: int) -> int:
    """
    Number of variables available to a booleanomial of `term_count` terms, i.e. log2(term_count).

    Parameters:
        term_count (int): Number of terms.

    Returns:
        int: Variable count.
    """
    return check_term_count(term_count).bit_length() - 1


def term_index(variables) -> int:
    """
    Builds the term-index of the monomial containing exactly `variables`.

    Parameters:
        variables (iterable): Variable indices in the monomial.

    Returns:
        int: Term-index.

    Examples:
        >>> term_index([0, 2])
        5

    """
    idx = 0
    for var in variables:
        if var < 0:
            raise OutOfRangeException(f'Variable indices must be non-negative, got {var}')

        idx |= 1 << var

    return idx


def term_variables(idx: int) -> list:
    """
    Inverse of `term_index`.

    Examples:
        >>> term_variables(5)
        [0, 2]

    """
    if idx < 0:
        raise OutOfRangeException(f'Term-index must be non-negative, got {idx}')

    return [k for k in range(idx.bit_length()) if (idx >> k) & 1]
