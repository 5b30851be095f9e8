import sys
import pathlib
import unittest

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
from lzb.bitstream import BitWriter, BitReader
from lzb.errors import TruncatedStream


class TestBitstream(unittest.TestCase):
    def test_write_then_read_fields(self):
        writer = BitWriter()
        fields = [(0, 2), (97, 8), (5, 3), (0x1000, 16), (2, 4), (1, 1)]
        for value, width in fields:
            writer.write(value, width)
        writer.flush()
        data = bytes(writer.getvalue())
        print('Packed fields:', data.hex())
        reader = BitReader(data)
        for value, width in fields:
            self.assertEqual(reader.read(width), value)

    def test_first_bit_lands_in_msb(self):
        writer = BitWriter()
        writer.write(1, 1)
        writer.flush()
        self.assertEqual(bytes(writer.getvalue()), b'\x80')

    def test_flush_pads_aligned_writer_with_zero_byte(self):
        writer = BitWriter()
        writer.write(0xFF, 8)
        self.assertEqual(writer.bit_count, 8)
        writer.flush()
        self.assertEqual(bytes(writer.getvalue()), b'\xff\x00')

    def test_reader_respects_window(self):
        data = b'\x00\xff\x00'
        reader = BitReader(data, offset=1, length=1)
        self.assertEqual(reader.read(8), 0xFF)
        self.assertEqual(reader.consumed, 2)
        with self.assertRaises(TruncatedStream):
            reader.read(1)

    def test_reader_on_empty_input(self):
        with self.assertRaises(TruncatedStream):
            BitReader(b'').read(2)


if __name__ == '__main__':
    unittest.main()
