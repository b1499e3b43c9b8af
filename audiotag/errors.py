# Copyright (c) 2026, The audiotag developers

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class CorruptFrameWarning(FrameWarning): pass
class OversizedFrameWarning(FrameWarning): pass

class TagWarning(Warning): pass

class NoTagError(Error): pass
class TagError(Error, ValueError): pass
class ShortTrailerError(TagError): pass
class FrameError(Error): pass
class FrameSizeError(FrameError): pass
class FieldTooLongError(Error, ValueError): pass

class SpliceError(Error, OSError):
    # Set to a freshly opened handle when the failure happened after the
    # original handle was closed.
    file = None
