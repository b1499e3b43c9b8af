# Copyright (c) 2026, The audiotag developers

"""Fixed-layout (ID3v1/ID3v1.1) tags at the end of a file.

The tag is a 128-byte block: b"TAG" followed by these fields, at
offsets relative to the end of the signature:

    title    0  30
    artist  30  30
    album   60  30
    year    90   4
    comment 94  30
    genre  124   1

If byte 28 of the comment is zero, byte 29 holds a track number and the
comment proper is only 28 bytes long (ID3v1.1).
"""

from audiotag.errors import *

import audiotag.fileutil as fileutil

_SIGNATURE = b"TAG"

_COMMENT_V11 = 28
_TRACK_BYTE = 29

def _decode_str(data):
    return bytes(data).split(b"\x00", 1)[0].decode("iso-8859-1").rstrip(" ")

def _encode_str(value, width, name):
    data = value.encode("iso-8859-1", errors="replace")
    if len(data) > width:
        raise FieldTooLongError("{0} is {1} bytes long; the limit is {2}"
                                .format(name, len(data), width))
    return data + b"\x00" * (width - len(data))

def _parse_byte(value, name):
    try:
        n = int(value)
    except ValueError:
        raise ValueError("{0} must be a number, not {1!r}".format(name, value)) from None
    if not 0 <= n <= 255:
        raise ValueError("{0} must be between 0 and 255".format(name))
    return n

class Tag1:
    signature = _SIGNATURE
    size = 128

    # name -> (offset after the signature, width)
    fields = {
        "title": (0, 30),
        "artist": (30, 30),
        "album": (60, 30),
        "year": (90, 4),
        "comment": (94, 30),
        "genre": (124, 1),
        }

    def __init__(self, offset=None, title="", artist="", album="", year="",
                 comment="", track=None, genre=0):
        self.offset = offset
        self.title = title
        self.artist = artist
        self.album = album
        self.year = year
        self.comment = comment
        self.track = track
        self.genre = genre

    def __eq__(self, other):
        return (isinstance(other, Tag1)
                and self.title == other.title
                and self.artist == other.artist
                and self.album == other.album
                and self.year == other.year
                and self.comment == other.comment
                and self.track == other.track
                and self.genre == other.genre)

    def __repr__(self):
        return ("Tag1(title={0!r}, artist={1!r}, album={2!r}, year={3!r}, "
                "comment={4!r}, track={5!r}, genre={6!r})"
                .format(self.title, self.artist, self.album, self.year,
                        self.comment, self.track, self.genre))

    @classmethod
    def find(cls, file):
        """Return the offset of the tag at the end of file.
        Raises NoTagError if there is none."""
        filesize = fileutil.file_size(file)
        if filesize < cls.size:
            raise NoTagError("File too short for an ID3v1 tag")
        file.seek(filesize - cls.size)
        signature = file.read(len(cls.signature))
        if len(signature) != len(cls.signature):
            raise ShortTrailerError("Can't read ID3v1 signature")
        if signature != cls.signature:
            raise NoTagError("ID3v1 tag not found")
        return filesize - cls.size

    @classmethod
    def read(cls, filename):
        with fileutil.opened(filename, "rb") as file:
            offset = cls.find(file)
            file.seek(offset)
            try:
                data = fileutil.xread(file, cls.size)
            except EOFError:
                raise ShortTrailerError("Truncated ID3v1 tag") from None
            tag = cls.decode(data)
            tag.offset = offset
            return tag

    @classmethod
    def decode(cls, data):
        if len(data) != cls.size:
            raise ShortTrailerError("ID3v1 tag must be {0} bytes".format(cls.size))
        if data[0:3] != cls.signature:
            raise NoTagError("ID3v1 tag not found")
        body = data[3:]

        def field(name):
            offset, width = cls.fields[name]
            return body[offset:offset + width]

        tag = cls(title=_decode_str(field("title")),
                  artist=_decode_str(field("artist")),
                  album=_decode_str(field("album")),
                  year=_decode_str(field("year")),
                  genre=field("genre")[0])
        comment = field("comment")
        if comment[_COMMENT_V11] == 0:
            tag.comment = _decode_str(comment[:_COMMENT_V11])
            tag.track = comment[_TRACK_BYTE]
        else:
            tag.comment = _decode_str(comment)
        return tag

    def encode(self):
        data = bytearray(self.signature)
        data.extend(_encode_str(self.title, 30, "Title"))
        data.extend(_encode_str(self.artist, 30, "Artist"))
        data.extend(_encode_str(self.album, 30, "Album"))
        data.extend(_encode_str(self.year, 4, "Year"))
        if self.track is not None:
            data.extend(_encode_str(self.comment, _COMMENT_V11, "Comment"))
            data.append(0)
            data.append(_parse_byte(self.track, "Track"))
        else:
            data.extend(_encode_str(self.comment, 30, "Comment"))
        data.append(_parse_byte(self.genre, "Genre"))
        assert len(data) == self.size
        return bytes(data)

    @classmethod
    def create(cls, file):
        """Append an empty tag to file.  Returns the new tag; its fields
        are all empty or zero."""
        offset = file.seek(0, 2)
        file.write(cls.signature + bytes(cls.size - len(cls.signature)))
        file.seek(offset + len(cls.signature))
        return cls(offset=offset, track=0)

    def _field_offset(self, name):
        return self.offset + len(self.signature) + self.fields[name][0]

    def read_field(self, file, name):
        offset, width = self.fields[name]
        file.seek(self._field_offset(name))
        try:
            return fileutil.xread(file, width)
        except EOFError:
            raise ShortTrailerError("Truncated ID3v1 tag") from None

    def write_field(self, file, name, data, skip=0):
        """Overwrite field name with data.  data must fill the field from
        byte skip to the end, or the field's first len(data) bytes if
        skip is zero; trailing bytes of the field are left untouched."""
        offset, width = self.fields[name]
        if skip + len(data) > width:
            raise FieldTooLongError("{0} bytes don't fit in the {1}-byte {2} field"
                                    .format(len(data), width, name))
        file.seek(self._field_offset(name) + skip)
        file.write(data)

    def edit(self, file, shell):
        """Ask shell about each field in order and rewrite the ones that
        change, directly at their fixed offsets."""
        for name in ("title", "artist", "album", "year"):
            width = self.fields[name][1]
            current = _decode_str(self.read_field(file, name))
            value = shell.decide_field(name.capitalize(), current, width)
            if value is not None:
                if name == "year" and value and not value.isdigit():
                    raise ValueError("Year must be numeric, not {0!r}".format(value))
                self.write_field(file, name, _encode_str(value, width, name.capitalize()))
                current = value
            setattr(self, name, current)

        self._edit_comment(file, shell)

        genre = self.read_field(file, "genre")[0]
        value = shell.decide_field("Genre ID", str(genre), 3)
        if value is not None:
            genre = _parse_byte(value, "Genre ID")
            self.write_field(file, "genre", bytes([genre]))
        self.genre = genre

    def _edit_comment(self, file, shell):
        raw = self.read_field(file, "comment")
        if raw[_COMMENT_V11] != 0:
            comment = _decode_str(raw)
            value = shell.decide_field("Comment", comment, 30)
            track = None
            if value is not None:
                data = _encode_str(value, 30, "Comment")
                self.write_field(file, "comment", data)
                comment = value
                if data[_COMMENT_V11] == 0:
                    # Short comments are zero padded, which makes the
                    # field read back as packed.
                    track = data[_TRACK_BYTE]
            self.comment, self.track = comment, track
            return

        # Packed comment and track number.  The sentinel byte stays zero,
        # so the comment is limited to 28 bytes whatever else changes.
        comment = _decode_str(raw[:_COMMENT_V11])
        track = raw[_TRACK_BYTE]
        new_comment = shell.decide_field("Comment", comment, _COMMENT_V11)
        new_track = shell.decide_field("Track", str(track), 3)
        if new_comment is not None:
            text = _encode_str(new_comment, _COMMENT_V11, "Comment")
            comment = new_comment
        if new_track is not None:
            track = _parse_byte(new_track, "Track")

        if new_comment is not None and new_track is not None:
            self.write_field(file, "comment", text + bytes([0, track]))
        elif new_comment is not None:
            self.write_field(file, "comment", text)
        elif new_track is not None:
            self.write_field(file, "comment", bytes([track]), skip=_TRACK_BYTE)
        self.comment, self.track = comment, track
