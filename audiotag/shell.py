# Copyright (c) 2026, The audiotag developers

"""The interface between tag codecs and whoever makes editing decisions."""

import abc
import sys

from abc import abstractmethod

class Decision:
    "What to do with a frame: keep it, remove it, or replace its text."
    actions = ("keep", "remove", "replace")

    def __init__(self, action, text=None):
        if action not in self.actions:
            raise ValueError("Unknown action {0!r}".format(action))
        if (action == "replace") != (text is not None):
            raise ValueError("Only replace decisions carry text")
        self.action = action
        self.text = text

    @classmethod
    def replace(cls, text):
        return cls("replace", text)

    def __eq__(self, other):
        return (isinstance(other, Decision)
                and self.action == other.action
                and self.text == other.text)

    def __repr__(self):
        if self.text is None:
            return "Decision({0!r})".format(self.action)
        return "Decision({0!r}, {1!r})".format(self.action, self.text)

KEEP = Decision("keep")
REMOVE = Decision("remove")

class Shell(metaclass=abc.ABCMeta):
    """Supplies decisions to the codecs and receives what they find.

    Codecs call show_* for display only; decide_* return values that
    drive the edit.
    """
    @abstractmethod
    def decide_frame(self, name, text):
        "Return a Decision for a frame called name with the given text."

    @abstractmethod
    def decide_field(self, name, current, width):
        """Return new text for field name (at most width bytes), or None
        to leave it unchanged."""

    @abstractmethod
    def decide_yes_no(self, prompt): pass

    def show_format(self, name): pass

    def show_frame(self, name, size, text, encoding): pass


class ConsoleShell(Shell):
    "Prompts on a terminal."
    max_text_length = 60

    def __init__(self, input=None, output=None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def _print(self, *args, **kwargs):
        print(*args, file=self.output, **kwargs)

    def _readline(self, prompt):
        self._print(prompt, end="")
        self.output.flush()
        line = self.input.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def _ask(self, prompt):
        while True:
            answer = self._readline(prompt).strip().lower()
            if answer in ("y", "n"):
                return answer == "y"

    def _read_text(self, prompt, width):
        while True:
            text = self._readline("{0} (max {1} chars): ".format(prompt, width))
            if len(text.encode("iso-8859-1", errors="replace")) <= width:
                return text
            self._print("Too long.")

    def show_format(self, name):
        self._print(name)

    def show_frame(self, name, size, text, encoding):
        if encoding == "void":
            self._print("{0} ({1}): VOID".format(name, size))
        else:
            self._print("{0} ({1}): {2}".format(name, size, text))
            self._print("Text Encoding: {0}".format(encoding))

    def decide_frame(self, name, text):
        decision = KEEP
        if self._ask("Change field? (y/n): "):
            if self._ask("Remove field? (y/n): "):
                decision = REMOVE
            else:
                decision = Decision.replace(self._read_text("New Text",
                                                            self.max_text_length))
        self._print()
        return decision

    def decide_field(self, name, current, width):
        self._print("{0}: {1:.30}".format(name, current))
        value = None
        if self._ask("Update {0}? (y/n) ".format(name)):
            value = self._read_text("New {0}".format(name), width)
        self._print()
        return value

    def decide_yes_no(self, prompt):
        return self._ask("{0} (y/n): ".format(prompt))
