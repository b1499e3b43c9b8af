# Copyright (c) 2026, The audiotag developers

"""Find the tag in a file and run the matching editing pass."""

from audiotag.errors import *
from audiotag.tags import Tag2, detect_tag, create_tag2
from audiotag.id3v1 import Tag1

def edit(file, shell):
    """Edit the tag of file, creating one if the shell agrees.

    file must be opened for reading and writing.  Returns (file, tag):
    the file object to use from now on (splices replace it) and the tag
    that was edited, or None if the file was left untagged.
    """
    try:
        cls, offset, length = detect_tag(file)
    except NoTagError:
        return create_tag(file, shell)

    if cls is Tag2:
        shell.show_format("ID3v2")
        file.seek(offset)
        tag = Tag2.read_header(file)
        file, fields = tag.edit(file, shell)
    else:
        shell.show_format("ID3v1")
        tag = Tag1(offset=offset)
        tag.edit(file, shell)
    return file, tag

def create_tag(file, shell):
    "Offer to add an ID3v2 tag, or failing that, an ID3v1 tag."
    if shell.decide_yes_no("Add ID3v2 tags?"):
        file, tag, fields = create_tag2(file, shell)
        return file, tag
    if shell.decide_yes_no("Add ID3v1 tags?"):
        tag = Tag1.create(file)
        tag.edit(file, shell)
        return file, tag
    return file, None

def edit_file(filename, shell):
    "Edit the tag of the named file.  Returns the edited tag, or None."
    file = open(filename, "rb+")
    try:
        file, tag = edit(file, shell)
    finally:
        file.close()
    return tag
