# Copyright (c) 2026, The audiotag developers

import unittest
import io
import os
import os.path
import tempfile

from audiotag.errors import *
from audiotag.editor import edit, edit_file
from audiotag.shell import Decision, ConsoleShell, KEEP, REMOVE
from audiotag.tags import Tag2
from audiotag.id3v1 import Tag1

from scripted_shell import ScriptedShell, frame_data, tag_data, AUDIO

TITLE = frame_data("TIT2", b"\x00Hello\x00")

class EditorTestCase(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory(prefix="audiotagtest-")
        self.filename = os.path.join(self.tempdir.name, "song.mp3")

    def tearDown(self):
        self.tempdir.cleanup()

    def make_file(self, data):
        with open(self.filename, "wb") as file:
            file.write(data)

    def contents(self):
        with open(self.filename, "rb") as file:
            return file.read()

    def testDispatchID3v2(self):
        self.make_file(tag_data([TITLE], padding=10) + AUDIO)
        shell = ScriptedShell(frames={"Title": Decision.replace("Goodbye")})
        tag = edit_file(self.filename, shell)
        self.assertIsInstance(tag, Tag2)
        self.assertEqual(shell.formats, ["ID3v2"])
        self.assertEqual(shell.questions, [])
        tag, frames = Tag2.read(self.filename)
        self.assertEqual(frames[0].text(), "Goodbye")

    def testDispatchID3v1(self):
        block = b"TAG" + b"Title" + bytes(120)
        self.make_file(AUDIO + block)
        shell = ScriptedShell(fields={"Artist": "Artist"})
        tag = edit_file(self.filename, shell)
        self.assertIsInstance(tag, Tag1)
        self.assertEqual(shell.formats, ["ID3v1"])
        self.assertEqual(shell.asked[0], ("Title", "Title", 30))
        self.assertEqual(Tag1.read(self.filename).artist, "Artist")
        self.assertEqual(len(self.contents()), len(AUDIO) + 128)

    def testID3v2TakesPrecedence(self):
        self.make_file(tag_data([TITLE]) + AUDIO + b"TAG" + bytes(125))
        shell = ScriptedShell()
        edit_file(self.filename, shell)
        self.assertEqual(shell.formats, ["ID3v2"])

    def testCreateID3v1(self):
        self.make_file(AUDIO)
        shell = ScriptedShell(answers=[False, True])
        tag = edit_file(self.filename, shell)
        self.assertEqual(shell.questions, ["Add ID3v2 tags?", "Add ID3v1 tags?"])
        data = self.contents()
        self.assertEqual(len(data), len(AUDIO) + 128)
        self.assertEqual(data[:len(AUDIO)], AUDIO)
        self.assertEqual(data[len(AUDIO):len(AUDIO) + 3], b"TAG")
        self.assertEqual(data[len(AUDIO) + 3:], bytes(125))
        self.assertEqual([a[1] for a in shell.asked], ["", "", "", "", "", "0", "0"])
        self.assertEqual(tag.offset, len(AUDIO))

    def testCreateID3v2(self):
        self.make_file(AUDIO)
        shell = ScriptedShell(answers=[True], fields={"Title": "Fresh"})
        tag = edit_file(self.filename, shell)
        self.assertEqual(shell.questions, ["Add ID3v2 tags?"])
        data = self.contents()
        self.assertEqual(len(data), 4096 + len(AUDIO))
        self.assertEqual(data[4096:], AUDIO)
        self.assertEqual(tag.size, 4086)
        tag, frames = Tag2.read(self.filename)
        self.assertEqual([(f.frameid, f.text()) for f in frames], [("TIT2", "Fresh")])

    def testDeclineCreation(self):
        self.make_file(AUDIO)
        shell = ScriptedShell(answers=[False, False])
        self.assertIsNone(edit_file(self.filename, shell))
        self.assertEqual(self.contents(), AUDIO)

    def testInMemory(self):
        file = io.BytesIO(tag_data([TITLE]) + AUDIO)
        newfile, tag = edit(file, ScriptedShell(frames={"Title": REMOVE}))
        self.assertIs(newfile, file)
        self.assertEqual(file.getvalue(), b"ID3\x03\x00\x00\x00\x00\x00\x00" + AUDIO)


class ConsoleShellTestCase(unittest.TestCase):
    def shell(self, text):
        self.output = io.StringIO()
        return ConsoleShell(io.StringIO(text), self.output)

    def testDecideFrame(self):
        self.assertEqual(self.shell("n\n").decide_frame("Title", "x"), KEEP)
        self.assertEqual(self.shell("y\ny\n").decide_frame("Title", "x"), REMOVE)
        self.assertEqual(self.shell("maybe\ny\nn\nNew title\n").decide_frame("Title", "x"),
                         Decision.replace("New title"))

    def testDecideField(self):
        self.assertIsNone(self.shell("n\n").decide_field("Year", "1999", 4))
        self.assertEqual(self.shell("y\n20011\n2001\n").decide_field("Year", "1999", 4),
                         "2001")
        self.assertIn("Too long.", self.output.getvalue())
        self.assertIn("Year: 1999", self.output.getvalue())

    def testShowFrame(self):
        shell = self.shell("")
        shell.show_frame("Title", 7, "Hello", "ASCII")
        shell.show_frame("Artist", 1, "", "void")
        self.assertEqual(self.output.getvalue(),
                         "Title (7): Hello\nText Encoding: ASCII\nArtist (1): VOID\n")

    def testEndOfInput(self):
        self.assertRaises(EOFError, self.shell("").decide_yes_no, "Add ID3v2 tags?")


def _suite():
    suite = unittest.TestSuite()
    for case in (EditorTestCase, ConsoleShellTestCase):
        suite.addTest(unittest.TestLoader().loadTestsFromTestCase(case))
    return suite

suite = _suite()

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
