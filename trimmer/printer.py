# trimmer/printer.py
# Centralized console output for the ezff CLI.
# Results go to stdout; errors and warnings go to stderr so they never mix
# with what ffmpeg prints or the command a --dry-run plans.

import os
import shlex
import sys
from typing import List, Optional


class OutputPrinter:
    """
    Output formatter for the ezff CLI.

    - success: result path with an aligned detail block
    - error / warning: always on stderr, with an optional fix hint
    - info: plain status line
    - command: shell-quoted argv for --dry-run, kept pipe-friendly
    Colour is optional and disabled by --no-color or the NO_COLOR variable.
    """

    SYMBOLS : dict[str, str] = {
        "success" : "✅",
        "error"   : "❌",
        "warning" : "⚠️ ",
        "info"    : "ℹ️ ",
        "hint"    : "→",
    }

    COLORS : dict[str, str] = {
        "green"  : "32",
        "red"    : "31",
        "yellow" : "33",
        "cyan"   : "36",
        "dim"    : "90",
    }

    COL_WIDTH : int = 10  # Column alignment for detail blocks

    def __init__(self, quiet : bool = False, no_color : bool = False) -> None:
        self.quiet    : bool = quiet
        self.no_color : bool = no_color or bool(os.environ.get("NO_COLOR", ""))

    # ── Internal ─────────────────────────────────────────────────

    def _colorize(self, text : str, code : str) -> str:
        """Apply ANSI color code if color output is enabled."""
        if self.no_color:
            return text
        return f"\033[{code}m{text}\033[0m"

    def _hint(self, hint : str) -> str:
        return self._colorize(f"{self.SYMBOLS['hint']} {hint}", self.COLORS["cyan"])

    # ── Level-1 outputs ──────────────────────────────────────────

    def success(self, title : str, details : Optional[dict[str, str]] = None) -> None:
        """Print a success message with an optional detail block."""
        if self.quiet:
            return
        symbol : str = self._colorize(self.SYMBOLS["success"], self.COLORS["green"])
        label  : str = self._colorize(title, self.COLORS["green"])
        print(f"\n{symbol}  {label}")
        if details:
            for key, value in details.items():
                dim_key : str = self._colorize(f"{key:<{self.COL_WIDTH}}", self.COLORS["dim"])
                print(f"    {dim_key}: {value}")

    def error(self, message : str, hint : Optional[str] = None) -> None:
        """Print an error to stderr with an optional fix hint. Never silenced."""
        symbol : str = self._colorize(self.SYMBOLS["error"], self.COLORS["red"])
        msg    : str = self._colorize(message, self.COLORS["red"])
        print(f"\n{symbol}  {msg}", file=sys.stderr)
        if hint:
            print(f"    {self._hint(hint)}", file=sys.stderr)

    def warning(self, message : str, hint : Optional[str] = None) -> None:
        """Print a warning to stderr with an optional suggestion."""
        if self.quiet:
            return
        symbol : str = self._colorize(self.SYMBOLS["warning"], self.COLORS["yellow"])
        msg    : str = self._colorize(message, self.COLORS["yellow"])
        print(f"\n{symbol} {msg}", file=sys.stderr)
        if hint:
            print(f"    {self._hint(hint)}", file=sys.stderr)

    def info(self, message : str) -> None:
        """Print an informational message."""
        if self.quiet:
            return
        symbol : str = self._colorize(self.SYMBOLS["info"], self.COLORS["cyan"])
        print(f"{symbol} {message}")

    def usage(self, text : str) -> None:
        """Print usage text to stderr, uncoloured. Never silenced."""
        print(text.rstrip("\n"), file=sys.stderr)

    def command(self, argv : List[str]) -> None:
        """Print a planned command on stdout, shell-quoted and uncoloured. Never silenced."""
        print(shlex.join(argv))
