# Copyright (c) 2026, The audiotag developers

"""Frame-based (ID3v2) tags and tag detection."""

from warnings import warn

from audiotag.errors import *
from audiotag.conversion import *
from audiotag.frames import Frame, HEADER_SIZE, is_padding
from audiotag.id3v1 import Tag1

import audiotag.fileutil as fileutil

_TAG_SIGNATURE = b"ID3"

def detect_tag(file):
    """Return type and position of the tag in file.
    Returns (tag_class, offset, length), where tag_class is either Tag2
    or Tag1, and (offset, length) is the position of the tag in the
    file.  Raises NoTagError if the file has neither kind of tag.
    """
    file.seek(0)
    header = file.read(HEADER_SIZE)
    if len(header) == HEADER_SIZE and header[0:3] == _TAG_SIGNATURE:
        try:
            length = Syncsafe.decode(header[6:10]) + HEADER_SIZE
        except ValueError as e:
            raise TagError("Invalid ID3v2 tag size: {0}".format(e)) from e
        return (Tag2, 0, length)
    try:
        offset = Tag1.find(file)
    except NoTagError:
        raise NoTagError("No ID3 tag found") from None
    return (Tag1, offset, Tag1.size)


class RequiredFieldSet:
    """Presence flags for the fields every tag is expected to have.

    A fresh set is created for each editing pass.  Flags are set when a
    matching frame is seen or added and cleared when one is removed.
    """
    frame_ids = {
        "title": ("TIT2",),
        "artist": ("TPE1",),
        "album": ("TALB",),
        "year": ("TORY", "TYER"),
        "track": ("TRCK",),
        "composer": ("TCOM",),
        }

    def __init__(self, kinds=None):
        if kinds is None:
            kinds = tuple(self.frame_ids)
        for kind in kinds:
            if kind not in self.frame_ids:
                raise ValueError("Unknown field kind {0!r}".format(kind))
        self._present = dict.fromkeys(kinds, False)

    def kind_of(self, frameid):
        "Return the required kind matching frameid, or None."
        for kind in self._present:
            if frameid in self.frame_ids[kind]:
                return kind
        return None

    def frameid_for(self, kind):
        "Return the frame id used when a frame of this kind is added."
        return self.frame_ids[kind][0]

    def mark(self, frameid, present=True):
        kind = self.kind_of(frameid)
        if kind is not None:
            self._present[kind] = present

    def missing(self):
        return [kind for kind in self._present if not self._present[kind]]

    def __contains__(self, kind):
        return self._present.get(kind, False)

    def __iter__(self):
        return iter(self._present)

    def __repr__(self):
        return "<RequiredFieldSet: {0}>".format(
            ", ".join("{0}{1}".format("" if self._present[k] else "!", k)
                      for k in self._present))


class Tag2:
    """An ID3v2.3 tag at the start of a file.

    size is the declared tag size, excluding the 10-byte tag header.
    Frames are never loaded all at once; edit() walks them one by one
    and splices each change into the file before reading the next.
    """
    version = 3
    revision = 0

    required = ("title", "artist", "album", "year", "track", "composer")

    max_text_length = 60
    max_frame_size = 16 << 20

    # Total size of a newly created tag region, padding included.
    padding_size = 4096

    def __init__(self, offset=0, size=0, version=None, revision=None, flags=0):
        self.offset = offset
        self.size = size
        if version is not None:
            self.version = version
        if revision is not None:
            self.revision = revision
        self.flags = flags
        self.delta = 0

    @property
    def end(self):
        "Absolute offset of the end of the frame region."
        return self.offset + HEADER_SIZE + self.size + self.delta

    def __repr__(self):
        return "<{0}: ID3v2.{1}.{2} tag at {3} with {4} bytes>".format(
            type(self).__name__, self.version, self.revision,
            self.offset, self.size)

    @classmethod
    def read_header(cls, file):
        "Read the tag header at the current position of file."
        offset = file.tell()
        try:
            header = fileutil.xread(file, HEADER_SIZE)
        except EOFError:
            raise NoTagError("ID3v2 tag not found") from None
        if header[0:3] != _TAG_SIGNATURE:
            raise NoTagError("ID3v2 tag not found")
        if header[3] not in (3, 4):
            raise TagError("Unsupported ID3 version: 2.{0}.{1}".format(*header[3:5]))
        if header[3] == 4:
            warn("ID3v2.4 frame sizes are read as plain integers", TagWarning)
        try:
            size = Syncsafe.decode(header[6:10])
        except ValueError as e:
            raise TagError("Invalid ID3v2 tag size: {0}".format(e)) from e
        return cls(offset=offset, size=size, version=header[3],
                   revision=header[4], flags=header[5])

    @classmethod
    def read(cls, filename):
        """Read the tag header and all frames of filename.
        Returns (tag, frames)."""
        with fileutil.opened(filename, "rb") as file:
            file.seek(0)
            tag = cls.read_header(file)
            return tag, list(tag.frames(file))

    def encode_header(self):
        data = bytearray(_TAG_SIGNATURE)
        data.append(self.version)
        data.append(self.revision)
        data.append(self.flags)
        data.extend(Syncsafe.encode(self.size + self.delta, width=4))
        return bytes(data)

    def frames(self, file):
        "Iterate over the frames of the tag without modifying anything."
        file.seek(self.offset + HEADER_SIZE)
        while True:
            frame = self._read_frame(file)
            if frame is None:
                return
            yield frame

    def _read_frame(self, file):
        """Read the frame at the current position, or return None at the
        end of the frame sequence.  The position is left at the start of
        the next frame, or at the start of padding."""
        start = file.tell()
        if start + HEADER_SIZE > self.end:
            return None
        header = file.read(HEADER_SIZE)
        if len(header) < HEADER_SIZE or is_padding(header):
            file.seek(start)
            return None
        try:
            frame = Frame.decode_header(header, offset=start)
        except FrameError as e:
            warn("Garbage after the last frame at offset {0}: {1}".format(start, e),
                 TagWarning)
            file.seek(start)
            return None
        filesize = fileutil.file_size(file)
        if start + frame.span > filesize:
            raise FrameSizeError("Frame {0} at offset {1} extends past the end of the file"
                                 .format(frame.frameid, start))
        if start + frame.span > self.end:
            warn("Frame {0} overruns the tag by {1} bytes"
                 .format(frame.frameid, start + frame.span - self.end),
                 CorruptFrameWarning)
        if frame.size > self.max_frame_size:
            warn("Frame {0} is too large to load ({1} bytes)"
                 .format(frame.frameid, frame.size), OversizedFrameWarning)
            file.seek(start + frame.span)
        else:
            frame.payload = fileutil.xread(file, frame.size)
        return frame

    def new_frame(self, frameid, text):
        "Create a text frame, enforcing max_text_length."
        frame = Frame.text_frame(frameid, text)
        if frame.size - 1 > self.max_text_length:
            raise FieldTooLongError("Text for {0} is {1} bytes long; the limit is {2}"
                                    .format(frameid, frame.size - 1,
                                            self.max_text_length))
        return frame

    def edit(self, file, shell, fields=None):
        """Walk the frames of the tag, asking shell what to do with each,
        then offer to add the required fields that are still missing.

        file must be positioned anywhere; it is repositioned to the first
        frame.  Returns (file, fields): the file object to use from now on
        and the presence flags at the end of the pass.

        If the pass fails, the header size is still brought up to date
        with the splices that did happen, and any handle the pass opened
        itself is closed; the caller remains responsible for file.
        """
        if fields is None:
            fields = RequiredFieldSet(self.required)
        self.delta = 0
        start = file
        try:
            file.seek(self.offset + HEADER_SIZE)
            while True:
                frame = self._read_frame(file)
                if frame is None:
                    break
                file = self._edit_frame(file, frame, shell, fields)
            for kind in fields.missing():
                file = self._add_field(file, shell, fields, kind)
        except BaseException as e:
            file = fileutil.current_file(e, file)
            if not file.closed:
                self._update_size(file)
            if file is not start:
                file.close()
            raise
        self._update_size(file)
        return file, fields

    def _edit_frame(self, file, frame, shell, fields):
        if frame.payload is None:
            text, label = "", "unknown"
        else:
            text, label = frame.describe()
            if label == "unknown":
                warn("Can't decode text of frame {0} at offset {1}"
                     .format(frame.frameid, frame.offset), CorruptFrameWarning)
        fields.mark(frame.frameid)
        shell.show_frame(frame.display_name, frame.size, text, label)

        decision = shell.decide_frame(frame.display_name, text)
        if decision.action == "remove":
            file = fileutil.delete_bytes(file, frame.offset, frame.span)
            file.seek(frame.offset)
            self.delta -= frame.span
            fields.mark(frame.frameid, False)
        elif decision.action == "replace":
            new = self.new_frame(frame.frameid, decision.text)
            file = fileutil.splice(file, frame.offset, frame.span, new.encode())
            self.delta += new.span - frame.span
            fields.mark(frame.frameid)
        return file

    def _add_field(self, file, shell, fields, kind):
        text = shell.decide_field(kind.capitalize(), "", self.max_text_length)
        if text is None:
            return file
        frame = self.new_frame(fields.frameid_for(kind), text)
        file = fileutil.insert_bytes(file, file.tell(), frame.encode())
        self.delta += frame.span
        fields.mark(frame.frameid)
        return file

    def _update_size(self, file):
        "Rewrite the declared tag size after frames were added or removed."
        if self.delta == 0:
            return
        self.size = max(0, self.size + self.delta)
        self.delta = 0
        pos = file.tell()
        file.seek(self.offset + 6)
        file.write(Syncsafe.encode(self.size, width=4))
        file.seek(pos)


def create_tag2(file, shell, tagcls=Tag2):
    """Prepend a new, empty ID3v2 tag to file and fill it with the
    required fields supplied by shell.  The tag region is padded with
    zeroes to tagcls.padding_size bytes.  Returns (file, tag, fields)."""
    tag = tagcls(offset=0, size=0)
    start = file
    try:
        file = fileutil.insert_bytes(file, tag.offset, tag.encode_header())
        file, fields = tag.edit(file, shell)
        pos = file.tell()
        padding = max(0, tag.offset + tag.padding_size - pos)
        if padding:
            file = fileutil.insert_bytes(file, pos, bytes(padding))
    except BaseException as e:
        file = fileutil.current_file(e, file)
        if file is not start:
            file.close()
        raise
    tag.delta = pos + padding - tag.end
    tag._update_size(file)
    return file, tag, fields
