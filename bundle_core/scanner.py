"""
Directive scanner - finds the import statements in a script.

Each line is parsed against the directive grammar; lines that don't parse,
use a disabled style, or point at something that isn't an existing .sh file
are ordinary script text.
"""
from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from bundle_core.grammar import directive_grammar
from bundle_core.models import ImportStatement, ImportStyle
from bundle_core.paths import to_valid_script


class DirectiveTransformer(Transformer):
    """Turns a parsed directive line into a (style, text) pair."""

    def start(self, items):
        return items[0]

    def comment_directive(self, items):
        return ImportStyle.COMMENT, str(items[0])

    def source_directive(self, items):
        return ImportStyle.SOURCE, str(items[0])


_parser = None


def get_parser():
    """Build the directive parser once and reuse it."""
    global _parser
    if _parser is None:
        _parser = Lark(directive_grammar, parser='lalr', transformer=DirectiveTransformer())
    return _parser


def parse_directive(line):
    """Return (style, text) if `line` starts with a directive prefix, else None."""
    try:
        return get_parser().parse(line)
    except UnexpectedInput:
        return None


def to_import(line, line_number, base_dir, config):
    """
    Build the ImportStatement for one line, if it is an enabled, valid directive.

    Args:
        line: The line text, without its newline
        line_number: Zero-based index of the line in its file
        base_dir: Directory of the file being scanned (base for comment style)
        config: BundleConfig of the run (source style is relative to its root)

    Returns:
        An unresolved ImportStatement, or None
    """
    parsed = parse_directive(line)
    if parsed is None:
        return None
    style, text = parsed

    if style is ImportStyle.COMMENT and config.enable_comment:
        resolve_dir = base_dir
    elif style is ImportStyle.SOURCE and config.enable_source and config.source_dir is not None:
        resolve_dir = config.source_dir
    else:
        return None

    valid = to_valid_script(resolve_dir, text)
    if valid is None:
        return None

    text, path = valid
    return ImportStatement(
        line_number=line_number,
        line=line,
        text=text,
        path=path,
        style=style,
    )


def iter_imports(script, config):
    """Iterate over the imports found in a loaded script, top to bottom."""
    base_dir = script.directory
    for index, line in enumerate(script.lines()):
        statement = to_import(line, index, base_dir, config)
        if statement is not None:
            yield statement
