"""
Terminal highlighting for rendered dumps using Pygments.
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer


def highlight_dump(text: str) -> str:
    """
    Colour a rendered dump with ANSI escape sequences.

    Args:
        text (str): Dump text as produced by the hex dumper

    Returns:
        str: The highlighted text, without a trailing newline
    """

    if not text:
        return text

    highlighted = highlight(text, HexdumpLexer(), TerminalFormatter())
    if highlighted.endswith('\n') and not text.endswith('\n'):
        highlighted = highlighted[:-1]

    return highlighted
