# Copyright (c) 2026, The audiotag developers

"""File manipulation utilities.

The host filesystem has no primitive for growing or shrinking a file in
the middle, so inserting or deleting bytes is done by copying the file
into a replacement next to it and renaming the replacement over the
original.  The copy is a single linear pass through a fixed-size buffer.

Every splice returns a file object; the one passed in must not be used
afterwards, because it may have been closed and its path now names a
different inode.
"""

import os
import os.path
import shutil
import signal
import tempfile
import threading

from contextlib import contextmanager

from audiotag.errors import *

BLOCK_SIZE = 128 * 1024

# Files without a backing path are spliced through a spooled buffer of this size.
MAX_MEM = 5 << 20

_splice_lock = threading.Lock()

def xread(file, length):
    "Read exactly length bytes from file; raise EOFError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise EOFError
    return data

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        file = open(filename, mode)
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename

@contextmanager
def suppress_interrupt():
    """Suppress KeyboardInterrupt exceptions while the context is active.

    The suppressed interrupt (if any) is raised when the context is exited.
    Signal handlers can only be installed from the main thread; elsewhere
    this is a no-op.
    """
    if threading.current_thread() is not threading.main_thread():
        yield None
        return

    interrupted = False

    def sigint_handler(signum, frame):
        nonlocal interrupted
        interrupted = True

    s = signal.signal(signal.SIGINT, sigint_handler)
    try:
        yield None
    finally:
        signal.signal(signal.SIGINT, s)
    if interrupted:
        raise KeyboardInterrupt()

def file_size(file):
    "Return the length of file, leaving its position unchanged."
    pos = file.tell()
    size = file.seek(0, 2)
    file.seek(pos)
    return size

def insert_bytes(file, offset, data):
    """Insert data at offset and return the file object to use from now on.
    The position is left at the end of the inserted data."""
    return splice(file, offset, 0, data)

def delete_bytes(file, offset, length):
    """Delete length bytes at offset and return the file object to use
    from now on.  The position is kept, clamped to the new file length."""
    return splice(file, offset, length, b"")

def splice(file, offset, length, chunk):
    """Replace length bytes at offset with chunk.

    Returns the file object callers must use for all subsequent
    operations.  Splices are serialized, and KeyboardInterrupts arriving
    while one is in progress are deferred until it is complete.

    If file has a path on disk, the result is built in a temporary file
    in the same directory which is then renamed over the original; a
    failure before the rename leaves the original untouched and raises
    SpliceError.  If the original handle had already been closed by
    then, the error's file attribute holds a new handle to the path.
    In-memory file objects are modified in place.
    """
    with _splice_lock, suppress_interrupt():
        return _splice(file, offset, length, bytes(chunk))

def _splice(file, offset, length, chunk):
    position = file.tell()
    oldsize = file.seek(0, 2)
    if offset < 0 or length < 0 or offset + length > oldsize:
        raise ValueError("Range {0}+{1} is outside of a {2}-byte file"
                         .format(offset, length, oldsize))
    newsize = oldsize - length + len(chunk)

    path = _backing_path(file)
    if path is None:
        _splice_in_place(file, offset, length, chunk, oldsize)
    else:
        file = _splice_by_copy(file, path, offset, length, chunk, oldsize)

    if length > 0 and not chunk:
        # Pure deletion
        file.seek(min(position, newsize))
    else:
        file.seek(offset + len(chunk))
    return file

def current_file(exc, file):
    """Return the file object to keep using after exc interrupted a
    sequence of splices whose latest result was file."""
    if isinstance(exc, SpliceError) and exc.file is not None:
        return exc.file
    return file

def _backing_path(file):
    name = getattr(file, "name", None)
    if isinstance(name, str) and os.path.isfile(name):
        return name
    return None

def _splice_by_copy(file, path, offset, length, chunk, oldsize):
    try:
        temp = tempfile.NamedTemporaryFile(dir=os.path.dirname(os.path.abspath(path)),
                                           prefix="audiotag-",
                                           suffix=".tmp",
                                           delete=False)
    except OSError as e:
        raise SpliceError("Can't create replacement for {0}: {1}".format(path, e)) from e
    try:
        try:
            file.seek(0)
            _copy_chunk(file, temp, offset)
            temp.write(chunk)
            file.seek(offset + length)
            _copy_chunk(file, temp, oldsize - offset - length)
        finally:
            temp.close()
        shutil.copymode(path, temp.name)
        file.close()
        os.replace(temp.name, path)
    except (OSError, EOFError) as e:
        _unlink_if_present(temp.name)
        error = SpliceError("Can't rewrite {0}: {1}".format(path, e))
        if file.closed:
            error.file = open(path, "rb+")
        raise error from e
    return open(path, "rb+")

def _splice_in_place(file, offset, length, chunk, oldsize):
    taillen = oldsize - offset - length
    file.seek(offset + length)
    with tempfile.SpooledTemporaryFile(max_size=MAX_MEM,
                                       prefix="audiotag-",
                                       suffix=".tmp") as temp:
        _copy_chunk(file, temp, taillen)
        file.seek(offset)
        file.truncate()
        file.write(chunk)
        temp.seek(0)
        _copy_chunk(temp, file, taillen)

def _copy_chunk(src, dst, length):
    "Copy length bytes from file src to file dst."
    while length > 0:
        buf = xread(src, min(BLOCK_SIZE, length))
        dst.write(buf)
        length -= len(buf)

def _unlink_if_present(path):
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
