# Copyright (c) 2026, The audiotag developers

import warnings
import sys
from contextlib import contextmanager

def verb(verbose, *args, **kwargs):
    if verbose:
        print(*args, **kwargs)

def describe_tag(tag):
    "One-line summary of a tag returned by audiotag.editor.edit."
    if tag is None:
        return "no tag"
    if hasattr(tag, "version"):
        return "ID3v2.{0}.{1} tag, {2} bytes".format(tag.version, tag.revision,
                                                     tag.size + 10)
    return "ID3v1{0} tag".format(".1" if tag.track is not None else "")

@contextmanager
def print_warnings(filename, options):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        try:
            yield None
        finally:
            if not options.quiet and len(ws) > 0:
                for w in ws:
                    print(filename + ":warning: " + str(w.message),
                          file=sys.stderr)
            sys.stderr.flush()
