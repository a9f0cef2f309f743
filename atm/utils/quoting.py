"""Argument quoting for rendered command lines.

Commands are executed as argument vectors, but atm logs and reports them as
the single line a user could paste into their shell. The quoting rules differ
between POSIX shells and cmd.exe:

    POSIX:   git commit -m "say \\"hi\\" now"
    Windows: git commit -m "say ""hi"" now"

Example:
    >>> from atm.enums import ShellStyle
    >>> from atm.utils.quoting import format_command
    >>> format_command(["git", "commit", "-m", "fix bug"], ShellStyle.POSIX)
    'git commit -m "fix bug"'
"""

import re
import sys
from collections.abc import Sequence

from atm.enums import ShellStyle

# Tokens made only of these characters are passed through unquoted
_SAFE_TOKEN = re.compile(r"^[\w@%+=:,./-]+$")

# Characters that keep their meaning inside POSIX double quotes
_POSIX_SPECIAL = re.compile(r'([\\"$`])')


def default_shell_style(platform: str | None = None) -> ShellStyle:
    """Return the quoting convention for a platform.

    Args:
        platform: A ``sys.platform`` value; defaults to the running platform.
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ShellStyle.WINDOWS
    return ShellStyle.POSIX


def quote_argument(value: str, style: ShellStyle) -> str:
    """Quote a single argument for the given shell convention.

    Args:
        value: The raw argument
        style: Quoting convention to apply

    Returns:
        The argument unchanged when it contains only safe characters,
        otherwise wrapped in double quotes with embedded specials escaped.

    Example:
        >>> quote_argument('say "hi"', ShellStyle.POSIX)
        '"say \\\\"hi\\\\""'
        >>> quote_argument('say "hi" now', ShellStyle.WINDOWS)
        '"say ""hi"" now"'
    """
    if value and _SAFE_TOKEN.match(value):
        return value

    if style == ShellStyle.WINDOWS:
        return '"' + value.replace('"', '""') + '"'

    return '"' + _POSIX_SPECIAL.sub(r"\\\1", value) + '"'


def format_command(args: Sequence[str], style: ShellStyle | None = None) -> str:
    """Render an argument vector as a single quoted command line."""
    style = style or default_shell_style()
    return " ".join(quote_argument(arg, style) for arg in args)
