"""Errors raised for names that do not satisfy the QName grammar."""


class QNameError(ValueError):
    """Base class of all grammar violations.

    More subclasses may be added in later versions, so code matching on
    them should keep a fallback for plain :class:`QNameError`.
    """

    def __init__(self):
        super().__init__(self.describe())

    def describe(self):
        return "Invalid QName"

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))

    def __reduce__(self):
        return (type(self), ())


class EmptyQNameError(QNameError):
    "the name had no characters"

    def describe(self):
        return "Invalid QName: Cannot be empty"


class InvalidStartError(QNameError):
    "the first character is not a name start character"

    def __init__(self, char):
        self.char = char
        self.position = 0
        super().__init__()

    def __reduce__(self):
        return (type(self), (self.char,))

    def describe(self):
        return "Invalid QName: First char cannot be %r" % self.char


class InvalidContinuationError(QNameError):
    "a character after the first one is not a name character"

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__()

    def describe(self):
        return "Invalid QName: Cannot contain %r" % self.char

    def __eq__(self, other):
        return super().__eq__(other) and self.position == other.position

    def __hash__(self):
        return hash((type(self), self.args, self.position))

    def __reduce__(self):
        return (type(self), (self.char, self.position))


class QNameContractError(RuntimeError):
    """A name was claimed valid without being checked, and it is not.

    This is a bug in the caller rather than bad input, and is not a
    :class:`QNameError`.
    """

    def __init__(self, name, error):
        self.name = name
        self.error = error
        super().__init__("Input '%s' is not a valid QName: %s." % (name, error))

    def __reduce__(self):
        return (type(self), (self.name, self.error))
