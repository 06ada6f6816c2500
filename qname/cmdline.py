import os
import sys
import logging
import ast
import click

from qname.literal import readSource, checkTree, rewriteTree, DEFAULT_MARKER_NAMES
from qname.name import QName
from qname.errors import QNameError

DEFAULT_LOGLEVEL = "INFO"

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def setup_logger(name, loglevel):
    level = getattr(logging, loglevel, None)
    if not level:
        print("Invalid log level '%s'" % loglevel)
        sys.exit()

    logging.basicConfig(level=level)
    return logging.getLogger(name)


def iterSourceFiles(paths):
    "yield the Python files named by PATHS, walking directories recursively"
    for path in paths:
        if not os.path.isdir(path):
            yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for filename in sorted(files):
                if filename.endswith(".py"):
                    yield os.path.join(root, filename)


def _formatDiagnostic(err):
    return "%s:%d:%d: %s" % (err.filename, err.lineno, err.offset or 0, err.msg)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--marker', '-m', 'markers', multiple=True,
              help="Name of the QName literal marker function, default: qname."
                   " Matches bare calls and calls on a name bound by 'import qname'"
                   " -- this option can be specified multiple times")
@click.option('--emit', '-e', is_flag=True,
              help='Print the source of checked files with literals pre-validated.')
@click.option('--loglevel', '-l',  default=DEFAULT_LOGLEVEL, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
              help='Log level')
def check(paths, markers, emit, loglevel):
    "Check qname() literals in Python sources, failing on invalid ones"

    logger = setup_logger("qname-check", loglevel)
    names = tuple(markers) or DEFAULT_MARKER_NAMES

    failed = 0
    checked = 0
    for path in iterSourceFiles(paths):
        checked += 1
        try:
            source = readSource(path)
            tree = ast.parse(source, path)
        except SyntaxError as ex:
            diagnostics = [ex]
        except UnicodeDecodeError as ex:
            click.echo("%s: cannot decode source: %s" % (path, ex), err=True)
            failed += 1
            continue
        else:
            diagnostics = checkTree(tree, source, path, names)

        for err in diagnostics:
            click.echo(_formatDiagnostic(err), err=True)
        failed += len(diagnostics)

        if emit and not diagnostics:
            click.echo("# %s" % path)
            click.echo(ast.unparse(rewriteTree(tree, names)))

    logger.info("checked %d file(s), %d invalid qname literal(s)", checked, failed)
    if failed:
        sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument('names', nargs=-1, required=True)
@click.option('--loglevel', '-l',  default=DEFAULT_LOGLEVEL, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
              help='Log level')
def parse(names, loglevel):
    "Parse qualified names and print their parts"

    logger = setup_logger("qname-parse", loglevel)

    invalid = 0
    for name in names:
        try:
            qname = QName.parse(name)
        except QNameError as ex:
            invalid += 1
            click.echo("%r: %s" % (name, ex))
            continue

        click.echo(qname.getFullname())
        click.echo("  namespace: %s" % qname.getNamespace())
        click.echo("  localname: %s" % qname.getLocalname())

    logger.debug("parsed %d name(s), %d invalid", len(names), invalid)
    if invalid:
        sys.exit(1)
