# Copyright (c) 2026, The audiotag developers

import audiotag.fileutil
import audiotag.frames
import audiotag.tags
import audiotag.id3v1

from audiotag.errors import *
from audiotag.frames import Frame
from audiotag.tags import detect_tag, create_tag2, RequiredFieldSet, Tag2
from audiotag.id3v1 import Tag1
from audiotag.shell import Shell, ConsoleShell, Decision, KEEP, REMOVE
from audiotag.editor import edit, edit_file

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
