"""
Import directive grammar.

This module contains the Lark grammar for a single line that may be an
import directive. Directives are recognized by their literal prefix only;
everything after the prefix, spaces included, is the path as written.
"""

directive_grammar = r"""
    start: comment_directive | source_directive

    // # import ./utils/utils.sh
    comment_directive: "# import " PATH

    // source ./utils/utils.sh
    source_directive: "source " PATH

    PATH: /.+/
"""
