# Bash Bundler - Core Components
"""
Core modules for the bundler:
- errors: Exception types for I/O, config and circular import failures
- models: ScriptFile / ImportStatement tree
- config: BundleConfig and the TOML config loader
- paths: Which files an import may include
- grammar: Lark grammar for import directive lines
- scanner: Finds import directives in a script
- bundler: Loads the import tree and inlines it
"""

from .errors import BundleError, BundleIOError, ConfigError, CircularImportError
from .models import ImportStatement, ImportStyle, ScriptFile
from .config import BundleConfig, load_config
from .bundler import CIRCULAR_CUT_OFF, bundle, load_dependents, load_file, resolve_dependents

__all__ = [
    'BundleError',
    'BundleIOError',
    'ConfigError',
    'CircularImportError',
    'ImportStatement',
    'ImportStyle',
    'ScriptFile',
    'BundleConfig',
    'load_config',
    'CIRCULAR_CUT_OFF',
    'bundle',
    'load_dependents',
    'load_file',
    'resolve_dependents',
]
