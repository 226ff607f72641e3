from booleanomial.math.booleanomial import Booleanomial
from booleanomial.math.term_index import check_term_count
from booleanomial.utilities.exceptions import InvalidTermCountException
from pyasn1.type.univ import Sequence, SequenceOf, Integer
from pyasn1.type.namedtype import NamedTypes, NamedType
from pyasn1.codec.der import encoder, decoder


class CoefficientsASN1(SequenceOf):
    componentType = Integer()


class BooleanomialASN1(Sequence):
    # Booleanomial ::= SEQUENCE(
    #     termCount INTEGER,                   # Power of two, at most 256
    #     coefficients SEQUENCE OF INTEGER,    # In term-index order
    # )
    componentType = NamedTypes(
        NamedType('termCount', Integer()),
        NamedType('coefficients', CoefficientsASN1()),
    )


def build(poly: Booleanomial) -> BooleanomialASN1:
    seq = BooleanomialASN1()
    seq['termCount'] = poly.term_count

    coeffs = CoefficientsASN1()
    coeffs.extend(poly.coeffs)

    seq['coefficients'] = coeffs
    return seq


def parse(seq: BooleanomialASN1) -> Booleanomial:
    term_count = check_term_count(int(seq['termCount']))
    coeffs     = [int(c) for c in seq['coefficients']]

    if len(coeffs) != term_count:
        raise InvalidTermCountException(f'Declared {term_count} terms but found {len(coeffs)} coefficients')

    return Booleanomial(coeffs)


def encode_der(poly: Booleanomial) -> bytes:
    return encoder.encode(build(poly))


def decode_der(data: bytes) -> Booleanomial:
    seq, _ = decoder.decode(bytes(data), asn1Spec=BooleanomialASN1())
    return parse(seq)
