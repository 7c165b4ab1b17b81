"""Error taxonomy shared by the parser, executor and stores."""


class CharlotteError(Exception):
    """Base class for every recoverable error raised while handling a command."""


class ParseError(CharlotteError):
    """Command text is malformed or names an unknown command."""


class TaskIndexError(CharlotteError, IndexError):
    """A task number does not refer to a task in the list."""


class ValidationError(CharlotteError, ValueError):
    """A task field is empty or cannot be stored."""


class StoreError(CharlotteError):
    """The data file could not be read, created or written."""


class RecordError(CharlotteError):
    """A line of the data file does not decode to a task."""


class MalformedRecordError(RecordError):
    """Record has missing fields or an invalid done flag."""


class UnknownTypeError(RecordError):
    """Record carries a type tag other than T, D or E."""
