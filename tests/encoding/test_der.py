from booleanomial.encoding.der import encode_der, decode_der, build
from booleanomial.math.booleanomial import Booleanomial, variable, zero
from booleanomial.utilities.exceptions import InvalidTermCountException
from pyasn1.codec.der import encoder
import unittest


class DERTestCase(unittest.TestCase):
    def test_known_encoding(self):
        # SEQUENCE { INTEGER 2, SEQUENCE { INTEGER 0, INTEGER 1 } }
        self.assertEqual(encode_der(variable(2, 0)), bytes.fromhex('300b0201023006020100020101'))


    def test_decode(self):
        a, b, c = [variable(8, z) for z in range(3)]
        cout = (a & b) | (c & (a ^ b))
        self.assertEqual(decode_der(encode_der(cout)), cout)
        self.assertEqual(decode_der(encode_der(zero(1))), zero(1))


    def test_bad_term_count(self):
        seq = build(Booleanomial([0, 1, 0, 0]))
        seq['termCount'] = 8
        self.assertRaises(InvalidTermCountException, lambda: decode_der(encoder.encode(seq)))

        seq['termCount'] = 3
        self.assertRaises(InvalidTermCountException, lambda: decode_der(encoder.encode(seq)))
