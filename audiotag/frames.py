# Copyright (c) 2026, The audiotag developers

"""ID3v2 frame records.

A frame is a 10-byte header (4-byte id, 4-byte big-endian payload size,
2 bytes of flags) followed by the payload.  For text frames the first
payload byte selects the text encoding.
"""

import re

from audiotag.errors import *
from audiotag.conversion import Int8

HEADER_SIZE = 10

PADDING_ID = b"\x00\x00\x00\x00"

# (label, codec, terminator, required byte order mark)
_encodings = (("ASCII", "iso-8859-1", b"\x00", None),
              ("UTF-16 (LE)", "utf-16-le", b"\x00\x00", b"\xff\xfe"),
              ("UTF-16 (BE)", "utf-16-be", b"\x00\x00", b"\xfe\xff"),
              ("UTF-8", "utf-8", b"\x00", None))

display_names = {
    "TIT2": "Title",
    "TPE1": "Artist",
    "TALB": "Album",
    "TORY": "Year",
    "TYER": "Year",
    "TRCK": "Track",
    "TCOM": "Composer",
    }

_frame_id_pattern = re.compile(b"^[A-Z][A-Z0-9]{2}[A-Z0-9 ]$")

def is_frame_id(data):
    # Allow a single space at the end; some taggers write such ids when
    # converting from three-character ids.
    return _frame_id_pattern.match(data) is not None

def is_padding(header):
    return header[0:4] == PADDING_ID

def encoding_label(encoding):
    if encoding is None or not 0 <= encoding < len(_encodings):
        return "unknown"
    return _encodings[encoding][0]

def decode_text(payload):
    """Decode the text of a text frame payload (encoding byte included).

    Raises FrameError if the encoding byte is unknown or a UTF-16 payload
    doesn't start with the byte order mark of its encoding.
    """
    if len(payload) <= 1:
        return ""
    enc = payload[0]
    if enc >= len(_encodings):
        raise FrameError("Invalid encoding 0x{0:X}".format(enc))
    label, codec, term, bom = _encodings[enc]
    data = payload[1:]
    if bom is not None:
        if data[0:2] != bom:
            raise FrameError("Missing {0} byte order mark".format(label))
        data = data[2:]
    if len(term) == 1:
        data = data.partition(term)[0]
    else:
        for i in range(0, len(data) - 1, 2):
            if data[i:i+2] == term:
                data = data[:i]
                break
        else:
            data = data[:len(data) & ~1]
    return data.decode(codec, errors="replace")

def encode_text(text):
    "Encode text as an ISO-8859-1 text frame payload."
    return b"\x00" + text.encode("iso-8859-1", errors="replace")


class Frame:
    """A single frame of a frame-based tag.

    payload is None for frames whose data has not been loaded (see
    Tag2.max_frame_size); size is always the size declared in the header.
    offset is the absolute file position of the header, if known.
    """
    def __init__(self, frameid, payload=None, flags=0, size=None, offset=None):
        self.frameid = frameid
        self.payload = payload
        self.flags = flags
        if size is None:
            size = len(payload) if payload is not None else 0
        self.size = size
        self.offset = offset

    @classmethod
    def decode_header(cls, header, offset=None):
        "Create a payload-less frame from a 10-byte header."
        if len(header) != HEADER_SIZE:
            raise FrameError("Frame header must be {0} bytes".format(HEADER_SIZE))
        if not is_frame_id(header[0:4]):
            raise FrameError("Invalid frame id {0!r}".format(bytes(header[0:4])))
        return cls(frameid=header[0:4].decode("ASCII"),
                   size=Int8.decode(header[4:8]),
                   flags=Int8.decode(header[8:10]),
                   offset=offset)

    @classmethod
    def text_frame(cls, frameid, text):
        "Create a new ISO-8859-1 text frame with cleared flags."
        return cls(frameid, encode_text(text), flags=0)

    @property
    def span(self):
        "Number of bytes the frame occupies in the file."
        return HEADER_SIZE + self.size

    @property
    def display_name(self):
        return display_names.get(self.frameid, self.frameid)

    @property
    def encoding(self):
        if not self.payload:
            return None
        return self.payload[0]

    @property
    def is_void(self):
        return self.size <= 1

    def text(self):
        if self.payload is None:
            raise FrameError("Frame {0} has not been loaded".format(self.frameid))
        return decode_text(self.payload)

    def describe(self):
        """Return (text, encoding label) for display.
        Void frames are labeled "void", unreadable ones "unknown"."""
        if self.is_void:
            return "", "void"
        try:
            return self.text(), encoding_label(self.encoding)
        except FrameError:
            return "", "unknown"

    def encode_header(self):
        data = bytearray()
        data.extend(self.frameid.encode("ASCII"))
        data.extend(Int8.encode(self.size, width=4))
        data.extend(Int8.encode(self.flags, width=2))
        assert len(data) == HEADER_SIZE
        return bytes(data)

    def encode(self):
        if not is_frame_id(self.frameid.encode("ASCII")):
            raise ValueError("Invalid frame id {0!r}".format(self.frameid))
        if self.payload is None or len(self.payload) != self.size:
            raise ValueError("Frame {0} has no payload to encode".format(self.frameid))
        return self.encode_header() + bytes(self.payload)

    def __eq__(self, other):
        return (isinstance(other, Frame)
                and self.frameid == other.frameid
                and self.flags == other.flags
                and self.size == other.size
                and self.payload == other.payload)

    def __repr__(self):
        args = ["{0!r}".format(self.frameid)]
        if self.payload is not None:
            args.append("<{0} bytes {1!r}{2}>".format(
                    self.size, bytes(self.payload[:20]),
                    "..." if self.size > 20 else ""))
        else:
            args.append("size={0}".format(self.size))
        if self.flags:
            args.append("flags=0x{0:04X}".format(self.flags))
        if self.offset is not None:
            args.append("offset={0}".format(self.offset))
        return "Frame({0})".format(", ".join(args))

    def __str__(self):
        text, label = self.describe()
        flag = "!" if label == "unknown" else " "
        return "{0}{1}({2} {3!r})".format(flag, self.frameid, label, text)
