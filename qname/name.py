"""Qualified name support; see e.g. https://en.wikipedia.org/wiki/QName"""

from functools import total_ordering

from .errors import QNameContractError
from .grammar import classify


def _split(name):
    namespace, sep, localname = name.partition(":")
    if not sep:
        return None, name
    return namespace, localname


@total_ordering
class QName:
    """Validated qualified name implementation.

    The plain constructor is for names already known to be valid and
    raises QNameContractError if one is not; use :meth:`parse` for names
    that have not been checked yet.
    """

    __slots__ = ("_namespace", "_localname", "_fullname")

    def __init__(self, name):
        error = classify(name)
        if error is not None:
            raise QNameContractError(name, error)

        self._assign(name)

    def _assign(self, name):
        namespace, localname = _split(name)
        object.__setattr__(self, "_namespace", namespace)
        object.__setattr__(self, "_localname", localname)
        object.__setattr__(self, "_fullname", name)

    @classmethod
    def parse(cls, name):
        "parse NAME, raising a QNameError subclass if it is not a valid QName"
        error = classify(name)
        if error is not None:
            raise error
        qname = cls.__new__(cls)
        qname._assign(name)
        return qname

    @classmethod
    def trusted(cls, name):
        "build from a NAME already known to be valid"
        return cls(name)

    def getNamespace(self):
        return self._namespace

    def getLocalname(self):
        return self._localname

    def getFullname(self):
        return self._fullname

    def __setattr__(self, attr, value):
        raise AttributeError("QName is immutable")

    def __delattr__(self, attr):
        raise AttributeError("QName is immutable")

    def _key(self):
        if self._namespace is None:
            return (0, "", self._localname, self._fullname)
        return (1, self._namespace, self._localname, self._fullname)

    def __eq__(self, other):
        if not isinstance(other, QName):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, QName):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __reduce__(self):
        return (self.__class__, (self._fullname,))

    def __str__(self):
        return self._fullname

    def __repr__(self):
        return "QName(%r)" % self._fullname


def parse(name):
    "parse NAME into a QName; raises a QNameError subclass on invalid input"
    return QName.parse(name)


def parseTrusted(name):
    """Build a QName from a NAME the caller guarantees to be valid.

    The name is still classified; if the guarantee was wrong a
    :class:`~qname.errors.QNameContractError` is raised.
    """
    return QName.trusted(name)


def isValid(name):
    "true if NAME is a valid qualified name"
    return classify(name) is None
