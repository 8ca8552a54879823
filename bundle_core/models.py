"""
Data model for scripts being bundled.

A ScriptFile owns the ImportStatements found in it, and every ImportStatement
owns the ScriptFile it points at once loaded, so a run builds a plain tree
rooted at the first script.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ImportStyle(str, Enum):
    """Which directive syntax an import was written in."""
    COMMENT = "comment"  # "# import ./file.sh", relative to the including file
    SOURCE = "source"    # "source ./file.sh", relative to the root file


@dataclass
class ImportStatement:
    """One import directive found in a script."""
    line_number: int
    line: str
    text: str
    path: Path
    style: ImportStyle
    resolved: Optional["ScriptFile"] = None


@dataclass
class ScriptFile:
    """Container for a shell script."""
    path: Path
    contents: Optional[str] = None
    dependents: List[ImportStatement] = field(default_factory=list)
    nested: int = 0

    def __str__(self):
        return self.contents if self.contents is not None else ""

    @property
    def is_loaded(self):
        return self.contents is not None

    @property
    def directory(self):
        """Directory that comment-style imports in this file are relative to."""
        return Path(self.path).parent

    def lines(self):
        """Iterate over the lines in the file."""
        if not self.is_loaded:
            return []
        return split_lines(self.contents)


def split_lines(text):
    """
    Split text into lines.

    Lines end at "\\n", a "\\r" right before a "\\n" is dropped, and a trailing
    newline does not produce an extra empty line.
    """
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in pieces]
    # the last piece had no "\n" after it, so any "\r" there is content
    if last:
        lines.append(last)
    return lines
