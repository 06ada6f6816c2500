"""Validation and representation of XML qualified names.

>>> from qname import parse
>>> parse("xs:string").getNamespace()
'xs'
"""

from .errors import QNameError, EmptyQNameError, InvalidStartError, \
                    InvalidContinuationError, QNameContractError
from .grammar import classify, isNameStartChar, isNameChar
from .name import QName, parse, parseTrusted, isValid


def qname(literal):
    """Mark LITERAL as a QName literal checked at build time.

    The ``qname-check`` tool rejects invalid literals before the program
    runs, and :func:`qname.literal.compileSource` replaces the call by a
    pre-validated construction.  Executed as-is, the call falls back to
    :func:`parseTrusted`, raising :class:`QNameContractError` for an
    invalid literal.
    """
    return parseTrusted(literal)
