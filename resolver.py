import sys
from pathlib import Path

from bundle_core.bundler import load_dependents, load_file, resolve_dependents
from bundle_core.errors import BundleIOError
from bundle_core.models import ScriptFile

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)

def iter_tree(script, depth=0):
    """Yield (depth, ImportStatement) for every import below `script`, depth first."""
    for statement in script.dependents:
        yield depth, statement
        if statement.resolved is not None:
            yield from iter_tree(statement.resolved, depth + 1)

def resolve(config):
    if config.root_path is None:
        raise BundleIOError("No such file or directory", suggestion="Pass a root file or set root_path in the config")
    root_path = Path(config.root_path)

    debug_log(
        f"Bundling {root_path} (comment imports: {config.enable_comment}, "
        f"source imports: {config.enable_source})"
    )

    # STEP 1: LOAD ROOT
    script = load_file(ScriptFile(path=root_path))

    # STEP 2: LOAD IMPORT TREE
    script = load_dependents(script, config)

    count = 0
    for depth, statement in iter_tree(script):
        count += 1
        debug_log(
            f"{'  ' * depth}line {statement.line_number + 1}: "
            f"{statement.style.value} import {statement.text!r} -> {statement.path}"
        )
    debug_log(f"Found {count} import(s)")

    # STEP 3: INLINE IMPORTS
    return str(resolve_dependents(script))
