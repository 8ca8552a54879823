"""
Error types raised while bundling shell scripts.
"""


class BundleError(Exception):
    """Base exception for bundling failures, with optional file context and hint."""
    def __init__(self, message, path=None, suggestion=None):
        self.message = message
        self.path = path  # File being processed when the failure happened
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = [self.message]
        if self.path is not None:
            lines.append(f" ({self.path})")

        if self.suggestion:
            lines.append(f"\n   💡 {self.suggestion}")

        return "".join(lines)


class BundleIOError(BundleError):
    """A script or config file could not be read."""


class ConfigError(BundleError):
    """A config file was read but does not have the expected structure."""


class CircularImportError(BundleError):
    """The import chain got deeper than the allowed nesting level."""
    def __init__(self, path=None):
        super().__init__(
            "Circular import found",
            path=path,
            suggestion="Check that no script imports itself, directly or through other scripts",
        )


def io_error(err, path):
    """Wrap an OSError raised while reading `path` into a BundleIOError."""
    reason = err.strerror or str(err)
    return BundleIOError(reason, path=path)
