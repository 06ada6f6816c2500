"""XML Namespaces name grammar; see https://www.w3.org/TR/REC-xml/#NT-Name"""

from .errors import EmptyQNameError, InvalidStartError, InvalidContinuationError


#: characters allowed anywhere in a name, including the first position
NAME_START_CHARS = frozenset(":_"
                             "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
                             "abcdefghijklmnopqrstuvwxyz")

#: inclusive code point ranges allowed anywhere in a name
NAME_START_RANGES = (
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

#: characters allowed after the first position only
NAME_CHARS = frozenset("-.0123456789\u00b7")

#: inclusive code point ranges allowed after the first position only
NAME_RANGES = (
    (0x0300, 0x036F),
    (0x203F, 0x2040),
)


def _inRanges(ch, ranges):
    cp = ord(ch)
    for low, high in ranges:
        if cp < low:
            return False
        if cp <= high:
            return True
    return False


def isNameStartChar(ch):
    "true if CH may start a name"
    return ch in NAME_START_CHARS or _inRanges(ch, NAME_START_RANGES)


def isNameChar(ch):
    "true if CH may appear in a name after the first character"
    return isNameStartChar(ch) or ch in NAME_CHARS or _inRanges(ch, NAME_RANGES)


def classify(name):
    """Find the first grammar violation in NAME.

    Returns the error describing it (an instance of one of the
    :class:`~qname.errors.QNameError` subclasses), or None when NAME is a
    valid qualified name. The error is returned, not raised.
    """
    if not isinstance(name, str):
        raise TypeError("QName must be a str, not %s" % type(name).__name__)

    if not name:
        return EmptyQNameError()

    if not isNameStartChar(name[0]):
        return InvalidStartError(name[0])

    for position in range(1, len(name)):
        if not isNameChar(name[position]):
            return InvalidContinuationError(name[position], position)

    return None
