"""Build-time checking of ``qname("...")`` literals in Python source.

A build step (CI job, pre-commit hook, make target) runs the checker over
the project's sources.  Every call to the :func:`qname.qname` marker must
take exactly one string literal, and that literal must classify as a valid
QName; otherwise a :class:`QNameLiteralError` pointing at the literal is
produced and the build fails.  Sources that pass can also be rewritten so
that each marker call becomes a pre-validated ``QName.trusted(...)``
construction.

A marker is a call to a bare name in the marker names (``qname("x")``
after ``from qname import qname``), or an attribute call whose base is a
name bound by ``import qname`` (``qname.qname("x")``).  Methods of other
objects that happen to share a marker name are not markers.
"""

import ast
import logging
import os
import tokenize

from .grammar import classify

#: callables treated as QName literal markers
DEFAULT_MARKER_NAMES = ("qname",)

#: module whose imports bind names usable as a marker attribute base
MARKER_MODULE = "qname"

logger = logging.getLogger(__name__)


class QNameLiteralError(SyntaxError):
    """A ``qname()`` literal that does not compile.

    ``error`` holds the classification error, or None when the call itself
    is malformed.
    """

    def __init__(self, msg, filename, lineno, offset, line=None, error=None):
        super().__init__(msg, (filename, lineno, offset, line))
        self.error = error

    def __reduce__(self):
        return (type(self), (self.msg, self.filename, self.lineno, self.offset,
                             self.text, self.error))

    def location(self):
        return "%s:%d:%d" % (self.filename, self.lineno, self.offset)


def checkLiteral(value, filename, lineno, offset, line=None):
    "raise QNameLiteralError if the literal VALUE is not a valid QName"
    error = classify(value)
    if error is not None:
        raise QNameLiteralError(str(error), filename, lineno, offset, line, error)


def constructionExpr(value):
    "build the ``QName.trusted(VALUE)`` expression for an already checked literal"
    qnameModule = ast.Call(func=ast.Name(id="__import__", ctx=ast.Load()),
                           args=[ast.Constant(value=MARKER_MODULE)], keywords=[])
    qnameClass = ast.Attribute(value=qnameModule, attr="QName", ctx=ast.Load())
    trusted = ast.Attribute(value=qnameClass, attr="trusted", ctx=ast.Load())
    return ast.Call(func=trusted, args=[ast.Constant(value=value)], keywords=[])


def constructionSource(value):
    return ast.unparse(constructionExpr(value))


def _moduleAliases(tree):
    "names bound to the qname package by ``import`` statements in TREE"
    aliases = set()
    for node in ast.walk(tree):
        if not isinstance(node, ast.Import):
            continue
        for alias in node.names:
            if alias.asname is None:
                if alias.name.split(".")[0] == MARKER_MODULE:
                    aliases.add(MARKER_MODULE)
            elif alias.name == MARKER_MODULE:
                aliases.add(alias.asname)
    return aliases


def _isMarker(node, names, aliases):
    if not isinstance(node, ast.Call):
        return False
    func = node.func
    if isinstance(func, ast.Name):
        return func.id in names
    if isinstance(func, ast.Attribute):
        return (func.attr in names and isinstance(func.value, ast.Name)
                and func.value.id in aliases)
    return False


def _literalArg(call):
    "the string literal argument of a marker CALL, or None if it is malformed"
    if len(call.args) != 1 or call.keywords:
        return None
    arg = call.args[0]
    if isinstance(arg, ast.Constant) and isinstance(arg.value, str):
        return arg
    return None


def iterQNameLiterals(tree, names=DEFAULT_MARKER_NAMES):
    "yield the marker calls found in TREE, in source order"
    aliases = _moduleAliases(tree)
    calls = [node for node in ast.walk(tree) if _isMarker(node, names, aliases)]
    calls.sort(key=lambda node: (node.lineno, node.col_offset))
    return iter(calls)


def _sourceLine(lines, lineno):
    if 0 < lineno <= len(lines):
        return lines[lineno - 1]
    return None


def _column(line, colOffset):
    "1-based character column of the UTF-8 byte offset COLOFFSET in LINE"
    if line is None:
        return colOffset + 1
    return len(line.encode("utf-8")[:colOffset].decode("utf-8", "replace")) + 1


def _diagnose(call, filename, lines):
    arg = _literalArg(call)
    if arg is None:
        line = _sourceLine(lines, call.lineno)
        return QNameLiteralError("qname() takes exactly one string literal",
                                 filename, call.lineno, _column(line, call.col_offset),
                                 line)
    line = _sourceLine(lines, arg.lineno)
    try:
        checkLiteral(arg.value, filename, arg.lineno, _column(line, arg.col_offset), line)
    except QNameLiteralError as ex:
        return ex
    return None


def checkTree(tree, source, filename="<unknown>", names=DEFAULT_MARKER_NAMES):
    """Check every marker call in TREE, parsed from SOURCE.

    Returns the list of diagnostics, empty when all literals are valid.
    """
    lines = source.splitlines()
    diagnostics = []
    count = 0
    for call in iterQNameLiterals(tree, names):
        count += 1
        diagnostic = _diagnose(call, filename, lines)
        if diagnostic is not None:
            logger.debug("%s: %s", diagnostic.location(), diagnostic.msg)
            diagnostics.append(diagnostic)
    logger.debug("%s: %d qname literal(s), %d invalid", filename, count, len(diagnostics))
    return diagnostics


def checkSource(source, filename="<unknown>", names=DEFAULT_MARKER_NAMES):
    """Check every marker call in SOURCE.

    A SyntaxError in SOURCE itself propagates.
    """
    return checkTree(ast.parse(source, filename), source, filename, names)


def readSource(path):
    "read the Python file at PATH, honouring a BOM or coding declaration"
    with tokenize.open(path) as f:
        return f.read()


def checkFile(path, names=DEFAULT_MARKER_NAMES):
    "check the marker calls of the Python file at PATH"
    logger.debug("checking %s", path)
    return checkSource(readSource(path), os.fspath(path), names)


class _TrustedRewriter(ast.NodeTransformer):

    def __init__(self, names, aliases):
        self._names = names
        self._aliases = aliases

    def visit_Call(self, node):
        self.generic_visit(node)
        if not _isMarker(node, self._names, self._aliases):
            return node
        return ast.copy_location(constructionExpr(_literalArg(node).value), node)


def rewriteTree(tree, names=DEFAULT_MARKER_NAMES):
    """Replace the marker calls of an already checked TREE by trusted constructions.

    TREE is modified in place and returned.
    """
    tree = _TrustedRewriter(names, _moduleAliases(tree)).visit(tree)
    return ast.fix_missing_locations(tree)


def transformSource(source, filename="<unknown>", names=DEFAULT_MARKER_NAMES, mode="exec"):
    """Check SOURCE and replace its marker calls by trusted constructions.

    Raises the first QNameLiteralError found; nothing is rewritten then.
    """
    tree = ast.parse(source, filename, mode)
    diagnostics = checkTree(tree, source, filename, names)
    if diagnostics:
        raise diagnostics[0]
    return rewriteTree(tree, names)


def compileSource(source, filename="<unknown>", mode="exec", names=DEFAULT_MARKER_NAMES):
    "compile SOURCE, failing with QNameLiteralError on an invalid qname() literal"
    return compile(transformSource(source, filename, names, mode), filename, mode)
