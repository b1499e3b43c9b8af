# Copyright (c) 2026, The audiotag developers

"""Integer codecs used in tag headers."""

from audiotag.errors import *

class Syncsafe:
    """Conversion to/from syncsafe integers.
    Syncsafe integers are big-endian sequences of 7-bit bytes; the high
    bit of every byte is zero so that the data never resembles an MPEG
    sync marker.
    """
    @staticmethod
    def decode(data):
        "Decodes a syncsafe integer"
        value = 0
        for b in data:
            if b > 127:
                raise ValueError("Invalid syncsafe integer")
            value = (value << 7) | b
        return value

    @staticmethod
    def encode(i, *, width=4):
        "Encodes a nonnegative integer into exactly width syncsafe bytes"
        if i < 0:
            raise ValueError("value is negative")
        if i >= 1 << (7 * width):
            raise ValueError("Integer too large")
        data = bytearray(width)
        for pos in range(width - 1, -1, -1):
            data[pos] = i & 127
            i >>= 7
        return bytes(data)

class Int8:
    """Conversion to/from unsigned big-endian integers of any width."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value = (value << 8) | b
        return value

    @staticmethod
    def encode(i, *, width):
        "Encodes a nonnegative integer into a big-endian byte string of given length"
        if i < 0:
            raise ValueError("Nonnegative integer expected")
        if i >= 1 << (8 * width):
            raise ValueError("Integer too large")
        data = bytearray(width)
        for pos in range(width - 1, -1, -1):
            data[pos] = i & 255
            i >>= 8
        return bytes(data)
