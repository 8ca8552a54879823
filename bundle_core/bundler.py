"""
Bundler for shell script imports.

Recursively resolves '# import ./file.sh' (and, when enabled, 'source ./file.sh')
directives by inlining file contents, similar to a C preprocessor.
"""
from pathlib import Path

from bundle_core.config import BundleConfig
from bundle_core.errors import BundleIOError, CircularImportError, io_error
from bundle_core.models import ScriptFile
from bundle_core.scanner import iter_imports

# Import chains deeper than this are treated as circular
CIRCULAR_CUT_OFF = 512


def load_file(script):
    """
    Read the script's contents from disk.

    Raises:
        BundleIOError: If the file can't be opened or read
    """
    try:
        with open(script.path, 'r', encoding='utf-8', newline='') as f:
            script.contents = f.read()
    except OSError as e:
        raise io_error(e, script.path) from e
    except UnicodeDecodeError as e:
        raise BundleIOError("stream did not contain valid UTF-8", path=script.path) from e
    return script


def load_dependents(script, config):
    """
    Find the imports in a loaded script and load each imported file's own tree.

    Every imported file is loaded separately, even when the same path is
    imported more than once.

    Raises:
        BundleIOError: If any imported file can't be read
        CircularImportError: If the import chain gets deeper than CIRCULAR_CUT_OFF
    """
    dependents = []
    for statement in list(iter_imports(script, config)):
        child = load_file(ScriptFile(path=statement.path, nested=script.nested + 1))
        if child.nested > CIRCULAR_CUT_OFF:
            raise CircularImportError(path=statement.path)

        statement.resolved = load_dependents(child, config)
        dependents.append(statement)

    script.dependents = dependents
    return script


def resolve_dependents(script):
    """
    Replace the import lines with the fully resolved imported files.

    Imports are handled in the order they were found: each child is resolved
    first, then its line is removed and the child's text inserted at the same
    index. Afterwards the script no longer has dependents.
    """
    lines = list(script.lines())
    for statement in script.dependents:
        if statement.resolved is None:
            continue
        dep = resolve_dependents(statement.resolved)
        lines.pop(statement.line_number)
        lines.insert(statement.line_number, str(dep))

    script.contents = "\n".join(lines)
    script.dependents = []
    return script


def bundle(file_path, config=None):
    """
    Load, import and resolve a script.

    Args:
        file_path: Path to the root .sh file
        config: BundleConfig; source-style imports are resolved relative to its
            root_path, which defaults to `file_path`

    Returns:
        The flattened ScriptFile

    Raises:
        BundleIOError: If the root or any imported file can't be read
        CircularImportError: On circular (or more than 512 levels deep) imports
    """
    if config is None:
        config = BundleConfig()
    if config.root_path is None:
        config = config.model_copy(update={"root_path": Path(file_path)})

    script = load_file(ScriptFile(path=Path(file_path)))
    return resolve_dependents(load_dependents(script, config))
