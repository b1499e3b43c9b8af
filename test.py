#!/usr/bin/python3

import audiotag
import os
import random
import warnings
import sys

from audiotag.fileutil import opened

warnings.simplefilter("always", audiotag.Warning)
#warnings.simplefilter("error", audiotag.Warning)

def list_mp3s(roots):
    for root in roots:
        if root.endswith(".mp3"):
            yield root
        else:
            for root, dirs, files in os.walk(root):
                dirs.sort()
                for file in sorted(files):
                    if file.endswith(".mp3"):
                        yield os.path.join(root, file)

def head(iterable, limit):
    if limit is None:
        for elem in iterable:
            yield elem
    else:
        for elem, i in zip(iterable, range(limit)):
            yield elem

def show(filename):
    "Print the tag of filename without changing anything."
    with opened(filename, "rb") as file:
        cls, offset, length = audiotag.detect_tag(file)
        file.seek(offset)
        if cls is audiotag.Tag2:
            tag = audiotag.Tag2.read_header(file)
            print(tag)
            for frame in tag.frames(file):
                print("    " + str(frame))
        else:
            print(audiotag.Tag1.read(file))

def test(*roots, wait=False, randomize=False, limit=None, catch_errors=True):
    mp3s = list_mp3s(roots)

    if randomize:
        mp3s = list(mp3s)
        print("{0} files found".format(len(mp3s)))
        random.shuffle(mp3s)

    for mp3 in head(mp3s, limit):
        try:
            print(mp3)
            show(mp3)
        except audiotag.NoTagError:
            pass
        except Exception as e:
            if catch_errors:
                print("{0}: {1} {2}".format(mp3, type(e).__name__, str(e)))
            else:
                raise
        if wait: input()

if __name__ == "__main__":
    test(*(sys.argv[1:] or ["."]))
