import sys
import pathlib
import unittest

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
import main
from lzb.encoder import LZBEncoder
from lzb.errors import SymbolOutOfRange


class TestEncoder(unittest.TestCase):
    def setUp(self):
        main.Reporter._metrics = {}

    def test_empty_input_produces_no_bytes(self):
        encoder = LZBEncoder()
        self.assertEqual(encoder.encode([]), bytearray())

    def test_single_narrow_symbol_layout(self):
        # tag 00, 'a' LSB first, end code 2 in three bits, zero padding
        data = LZBEncoder().encode([ord('a')])
        print('Encoded a:', bytes(data).hex())
        self.assertEqual(bytes(data), b'\x21\x90')

    def test_single_wide_symbol_layout(self):
        data = LZBEncoder().encode([0x1000])
        print('Encoded U+1000:', bytes(data).hex())
        self.assertEqual(bytes(data), b'\x80\x02\x10')

    def test_repeated_symbol_uses_dictionary(self):
        encoder = LZBEncoder(trace=True)
        data = encoder.encode([ord('a')] * 3)
        self.assertEqual(bytes(data), b'\x21\x8a\x00')
        self.assertEqual(encoder.trace, [(3, (97,)), (4, (97, 97))])

    def test_ten_repeats_beat_literal_encoding(self):
        data = LZBEncoder().encode([ord('a')] * 10)
        print('Ten repeats:', len(data), 'bytes')
        self.assertLess(len(data) * 8, 10 * 16)

    def test_deterministic_output(self):
        symbols = [ord(ch) for ch in 'abracadabra abracadabra']
        encoder = LZBEncoder()
        self.assertEqual(encoder.encode(symbols), encoder.encode(symbols))
        self.assertEqual(encoder.encode(symbols), LZBEncoder().encode(symbols))

    def test_out_of_range_symbol_rejected(self):
        encoder = LZBEncoder()
        with self.assertRaises(SymbolOutOfRange):
            encoder.encode([1, 0x10000])
        with self.assertRaises(ValueError):
            encoder.encode([-1])

    def test_metrics_reported(self):
        encoder = LZBEncoder(reporter=main.Reporter)
        encoder.encode([ord(ch) for ch in 'banana'])
        size, longest, literals = main.Reporter.report(
            ['dictionary_size', 'longest_match', 'literals_emitted']
        )
        print('Encoder metrics:', size, longest, literals)
        self.assertEqual(literals, 3)
        self.assertEqual(longest, 2)
        self.assertEqual(size, 7)
        self.assertEqual(size, len(encoder.dictionary))
        self.assertIsNotNone(main.Reporter.report('code_width'))


if __name__ == '__main__':
    unittest.main()
