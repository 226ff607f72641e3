from booleanomial.core.base_object import BaseObject
from booleanomial.math.term_index import check_term_count, variable_count, term_variables
from booleanomial.utilities.exceptions import OutOfRangeException, DimensionMismatchException
import logging

log = logging.getLogger(__name__)

_VARIABLE_LETTERS = 'abcdefgh'


class Booleanomial(BaseObject):
    """
    Multilinear integer polynomial representing a boolean function of `log2(N)` variables.

    The coefficient of term-index `i` is stored at `coeffs[i]`. Bit `k` of `i` is set iff the `k`-th
    variable appears in the term, so `coeffs[0b101] = 3` means the term `3ac`. Powers of variables
    never occur because `x^2 = x` for `x` in {0, 1}, which is why `2^V` terms cover every polynomial
    in `V` variables.

    Examples:
        >>> a, b = variable(4, 0), variable(4, 1)
        >>> str(a ^ b)
        'a + b - 2ab'

    """

    def __init__(self, coeffs) -> None:
        """
        Parameters:
            coeffs (iterable): Integer coefficients in term-index order. Length must be a power of two.
        """
        coeffs = tuple(coeffs)
        for c in coeffs:
            if not isinstance(c, int):
                raise TypeError(f'Coefficients must be integers, got {c!r}')

        coeffs = tuple(int(c) for c in coeffs)
        check_term_count(len(coeffs))
        self.coeffs = coeffs


    def __reprdir__(self):
        return ['__raw__', 'term_count']


    @property
    def __raw__(self):
        return str(self)


    @property
    def term_count(self) -> int:
        return len(self.coeffs)


    @property
    def num_variables(self) -> int:
        return variable_count(self.term_count)


    @staticmethod
    def zero(term_count: int) -> 'Booleanomial':
        """
        Constant `0` with `term_count` terms.
        """
        return Booleanomial([0] * check_term_count(term_count))


    @staticmethod
    def one(term_count: int) -> 'Booleanomial':
        """
        Constant `1` with `term_count` terms.
        """
        coeffs    = [0] * check_term_count(term_count)
        coeffs[0] = 1
        return Booleanomial(coeffs)


    @staticmethod
    def variable(term_count: int, z: int) -> 'Booleanomial':
        """
        Booleanomial that is `1` exactly when the `z`-th variable is `1`.

        Parameters:
            term_count (int): Number of terms.
            z          (int): Zero-based variable index.

        Returns:
            Booleanomial: The variable as a polynomial.
        """
        num_vars = variable_count(term_count)
        if type(z) is not int or not 0 <= z < num_vars:
            raise OutOfRangeException(f'Variable index must be in [0, {num_vars}) for {term_count} terms, got {z!r}')

        coeffs = [0] * term_count
        coeffs[1 << z] = 1
        return Booleanomial(coeffs)


    def _coerce(self, other) -> 'Booleanomial':
        if isinstance(other, int):
            coeffs    = [0] * self.term_count
            coeffs[0] = int(other)
            return Booleanomial(coeffs)

        elif isinstance(other, Booleanomial):
            if other.term_count != self.term_count:
                raise DimensionMismatchException(f'Cannot combine booleanomials of {self.term_count} and {other.term_count} terms')

            return other

        else:
            return None


    # Raw polynomial arithmetic

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return Booleanomial([a + b for a, b in zip(self.coeffs, other.coeffs)])


    def __radd__(self, other):
        return self + other


    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return Booleanomial([a - b for a, b in zip(self.coeffs, other.coeffs)])


    def __rsub__(self, other):
        return -self + other


    def __neg__(self):
        return Booleanomial([-c for c in self.coeffs])


    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        n = self.term_count
        log.debug(f'Multiplying booleanomials of {n} terms')

        result = [0] * n
        for i, a in enumerate(self.coeffs):
            if not a:
                continue

            for j, b in enumerate(other.coeffs):
                # Multiplying two terms yields the term containing the union of their
                # variables, e.g. 3ab * 2bc = 6abc and 011 | 110 = 111.
                result[i | j] += a * b

        return Booleanomial(result)


    def __rmul__(self, other):
        return self * other


    # Boolean connectives

    def __invert__(self):
        # ~x = 1 - x
        return 1 - self


    def __and__(self, other):
        # x & y = xy
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self * other


    def __rand__(self, other):
        return self & other


    def __or__(self, other):
        # x | y = x + y - xy
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self + other - self * other


    def __ror__(self, other):
        return self | other


    def __xor__(self, other):
        # x ^ y = x + y - 2xy
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self + other - 2 * (self * other)


    def __rxor__(self, other):
        return self ^ other


    not_ = __invert__
    and_ = __and__
    or_  = __or__
    xor  = __xor__


    def __eq__(self, other):
        return self.__class__ == other.__class__ and self.coeffs == other.coeffs


    def __hash__(self):
        return hash((self.__class__, self.coeffs))


    def __getitem__(self, idx: int) -> int:
        return self.coeffs[idx]


    def __len__(self) -> int:
        return self.term_count


    def __iter__(self):
        return iter(self.coeffs)


    def __bool__(self) -> bool:
        return any(self.coeffs)


    def is_constant(self) -> bool:
        return not any(self.coeffs[1:])


    def degree(self) -> int:
        """
        Largest number of variables in a term with a non-zero coefficient.
        """
        return max((bin(i).count('1') for i, c in enumerate(self.coeffs) if c), default=0)


    def support(self) -> list:
        """
        Letters of the variables that occur in at least one term.
        """
        mask = 0
        for i, c in enumerate(self.coeffs):
            if c:
                mask |= i

        return [_VARIABLE_LETTERS[k] for k in term_variables(mask)]


    def evaluate(self, *args, **kwargs) -> int:
        """
        Evaluates the polynomial at a 0/1 assignment of every variable.

        Parameters:
            *args    (int): Values for the variables in order (a, b, c, ...).
            **kwargs (int): Values keyed by variable letter.

        Returns:
            int: Value of the polynomial.

        Examples:
            >>> a, b = variable(4, 0), variable(4, 1)
            >>> (a | b).evaluate(1, 0)
            1
            >>> (a | b)(a=0, b=0)
            0

        """
        letters = _VARIABLE_LETTERS[:self.num_variables]
        if len(args) > len(letters):
            raise ValueError(f'Expected at most {len(letters)} values, got {len(args)}')

        values = dict(zip(letters, args))
        for sym, val in kwargs.items():
            if sym not in letters:
                raise ValueError(f'Unknown variable {sym!r}; expected one of {list(letters)}')

            if sym in values:
                raise ValueError(f'Variable {sym!r} assigned more than once')

            values[sym] = val

        missing = [sym for sym in letters if sym not in values]
        if missing:
            raise ValueError(f'Missing values for variables {missing}')

        zeroes = 0
        for k, sym in enumerate(letters):
            val = values[sym]
            if val not in (0, 1):
                raise ValueError(f'Variable {sym!r} must be 0 or 1, got {val!r}')

            if not val:
                zeroes |= 1 << k

        # A term survives iff none of its variables is zero
        return sum(c for i, c in enumerate(self.coeffs) if not i & zeroes)


    __call__ = evaluate


    def build_output_table(self) -> 'IOTable':
        from booleanomial.auxiliary.io_table import IOTable
        return IOTable.from_booleanomial(self)


    def __str__(self):
        num_vars = self.num_variables
        out      = []
        leading  = True

        for i, coeff in enumerate(self.coeffs):
            if not coeff:
                continue

            negative, mag = coeff < 0, abs(coeff)

            if leading:
                leading = False
                if negative:
                    out.append('-')
            else:
                out.append(' - ' if negative else ' + ')

            if mag != 1 or not i:
                out.append(str(mag))

            for k in range(num_vars):
                if (i >> k) & 1:
                    out.append(_VARIABLE_LETTERS[k])

        if leading:
            return '0'

        return ''.join(out)



def zero(term_count: int) -> Booleanomial:
    return Booleanomial.zero(term_count)


def one(term_count: int) -> Booleanomial:
    return Booleanomial.one(term_count)


def variable(term_count: int, z: int) -> Booleanomial:
    return Booleanomial.variable(term_count, z)


def multiply(a: Booleanomial, b: Booleanomial) -> Booleanomial:
    return a * b


def not_(a: Booleanomial) -> Booleanomial:
    return ~a


def and_(a: Booleanomial, b: Booleanomial) -> Booleanomial:
    return a & b


def or_(a: Booleanomial, b: Booleanomial) -> Booleanomial:
    return a | b


def xor(a: Booleanomial, b: Booleanomial) -> Booleanomial:
    return a ^ b
