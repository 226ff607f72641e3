from booleanomial.math.booleanomial import Booleanomial, zero, one, variable, multiply, not_, and_, or_, xor
from booleanomial.math.term_index import term_index, term_variables, variable_count, MAX_VARIABLES, MAX_TERM_COUNT
from booleanomial.auxiliary.io_table import IOTable
from booleanomial.encoding.der import encode_der, decode_der
from booleanomial.utilities.exceptions import BooleanomialException, InvalidTermCountException, OutOfRangeException, DimensionMismatchException
