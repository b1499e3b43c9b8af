# Copyright (c) 2026, The audiotag developers

"""Interactive command-line tag editor."""

import argparse
import sys

from audiotag.errors import *
from audiotag.editor import edit
from audiotag.shell import ConsoleShell
from audiotag.util import verb, describe_tag, print_warnings

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN = 2
EXIT_IO = 3
EXIT_CORRUPT = 5

def _parser():
    parser = argparse.ArgumentParser(
        prog="audiotag",
        description="Edit the ID3v1 or ID3v2 tag of an MP3 file in place.")
    parser.add_argument("file", help="MP3 file to edit")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="don't print warnings")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="describe the tag after editing")
    return parser

def main(argv=None, shell=None):
    try:
        options = _parser().parse_args(argv)
    except SystemExit as e:
        return EXIT_USAGE if e.code else EXIT_OK

    filename = options.file
    if not filename.lower().endswith(".mp3"):
        print("Usage: audiotag [file.mp3]", file=sys.stderr)
        return EXIT_USAGE

    try:
        file = open(filename, "rb+")
    except OSError as e:
        print("Could not open {0}: {1}".format(filename, e.strerror), file=sys.stderr)
        return EXIT_OPEN

    if shell is None:
        shell = ConsoleShell()
    with print_warnings(filename, options):
        try:
            file, tag = edit(file, shell)
        except (TagError, FrameError) as e:
            print("{0}: {1}".format(filename, e), file=sys.stderr)
            return EXIT_CORRUPT
        except ValueError as e:
            print("{0}: {1}".format(filename, e), file=sys.stderr)
            return EXIT_USAGE
        except OSError as e:
            print("{0}: {1}".format(filename, e), file=sys.stderr)
            return EXIT_IO
        except EOFError:
            print("{0}: unexpected end of input".format(filename), file=sys.stderr)
            return EXIT_USAGE
        finally:
            file.close()
    verb(options.verbose, "{0}: {1}".format(filename, describe_tag(tag)))
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
