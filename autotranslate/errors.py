"""
Error kinds raised while translating a file.

Every failure is fatal to the run; the CLI turns any AutotranslateError into
a message on stderr and exit status 1.
"""


class AutotranslateError(RuntimeError):
    pass


class InputFileNotFound(AutotranslateError):
    pass


class AmbiguousFormat(AutotranslateError):
    pass


class ServiceUnreachable(AutotranslateError):
    pass


class TranslationError(AutotranslateError):
    pass


class ParseError(AutotranslateError):
    pass


class ReadError(AutotranslateError):
    pass


class WriteError(AutotranslateError):
    pass
