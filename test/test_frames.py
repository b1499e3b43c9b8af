# Copyright (c) 2026, The audiotag developers

import unittest

from audiotag.errors import *
from audiotag.frames import *

class FramesTestCase(unittest.TestCase):
    def testDecodeText(self):
        self.assertEqual(decode_text(b"\x00Hello\x00\x00\x00"), "Hello")
        self.assertEqual(decode_text(b"\x00Hello"), "Hello")
        self.assertEqual(decode_text(b"\x01\xff\xfeH\x00i\x00\x00\x00junk"), "Hi")
        self.assertEqual(decode_text(b"\x02\xfe\xff\x00H\x00i"), "Hi")
        self.assertEqual(decode_text("\x03Café\x00".encode("utf-8")), "Café")

    def testDecodeVoid(self):
        self.assertEqual(decode_text(b""), "")
        self.assertEqual(decode_text(b"\x01"), "")

    def testDecodeCorrupt(self):
        # UTF-16 text must start with the byte order mark of its encoding
        self.assertRaises(FrameError, decode_text, b"\x01H\x00i\x00")
        self.assertRaises(FrameError, decode_text, b"\x01\xfe\xffH\x00")
        self.assertRaises(FrameError, decode_text, b"\x02\xff\xfe\x00H")
        self.assertRaises(FrameError, decode_text, b"\x07abc")

    def testHeader(self):
        frame = Frame.decode_header(b"TIT2\x00\x00\x00\x0e\x00\x40", offset=10)
        self.assertEqual(frame.frameid, "TIT2")
        self.assertEqual(frame.size, 14)
        self.assertEqual(frame.flags, 0x40)
        self.assertEqual(frame.offset, 10)
        self.assertEqual(frame.span, 24)
        self.assertIsNone(frame.payload)
        self.assertEqual(frame.encode_header(), b"TIT2\x00\x00\x00\x0e\x00\x40")
        self.assertRaises(FrameError, Frame.decode_header, b"tit2\x00\x00\x00\x0e\x00\x00")
        self.assertRaises(FrameError, Frame.decode_header, b"TIT2\x00\x00")

    def testPadding(self):
        self.assertTrue(is_padding(bytes(10)))
        self.assertFalse(is_padding(b"TIT2" + bytes(6)))

    def testTextFrame(self):
        frame = Frame.text_frame("TPE1", "World!")
        self.assertEqual(frame.size, 7)
        self.assertEqual(frame.flags, 0)
        self.assertEqual(frame.encoding, 0)
        self.assertEqual(frame.text(), "World!")
        self.assertEqual(frame.encode(), b"TPE1\x00\x00\x00\x07\x00\x00\x00World!")

    def testDescribe(self):
        self.assertEqual(Frame("TIT2", b"\x00Hi").describe(), ("Hi", "ASCII"))
        self.assertEqual(Frame("TIT2", b"\x00").describe(), ("", "void"))
        self.assertEqual(Frame("TIT2", b"").describe(), ("", "void"))
        self.assertEqual(Frame("TIT2", b"\x01Hi").describe(), ("", "unknown"))
        self.assertEqual(Frame("TIT2", b"\x01\xff\xfeH\x00").describe(),
                         ("H", "UTF-16 (LE)"))

    def testDisplayName(self):
        self.assertEqual(Frame("TIT2", b"").display_name, "Title")
        self.assertEqual(Frame("TYER", b"").display_name, "Year")
        self.assertEqual(Frame("TORY", b"").display_name, "Year")
        self.assertEqual(Frame("TCOM", b"").display_name, "Composer")
        self.assertEqual(Frame("TXXX", b"").display_name, "TXXX")

    def testStr(self):
        self.assertEqual(str(Frame("TIT2", b"\x00Hi")), " TIT2(ASCII 'Hi')")
        self.assertEqual(str(Frame("TIT2", b"\x09Hi")), "!TIT2(unknown '')")

suite = unittest.TestLoader().loadTestsFromTestCase(FramesTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
