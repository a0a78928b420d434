"""Browser navigation history with back and forward stacks."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator

DEFAULT_INPUT = "inputProblem1.txt"
DEFAULT_OUTPUT = "outputProblem1.txt"

_WORD_PATTERN = re.compile(r"\s*(\S+)")


class HistoryError(LookupError):
    """Raised when there is no page to move back or forward to."""


class BrowserHistory:
    """Tracks the current page plus the pages behind and ahead of it."""

    def __init__(self) -> None:
        self._back: list[str] = []
        self._forward: list[str] = []
        self.current = ""

    def visit(self, url: str) -> str:
        """Open ``url``; the old page goes into back history, forward history is dropped."""
        if self.current:
            self._back.append(self.current)
        self.current = url
        self._forward.clear()
        return self.current

    def back(self) -> str:
        """Move to the previous page and return it."""
        if not self._back:
            raise HistoryError("Cannot go back")
        self._forward.append(self.current)
        self.current = self._back.pop()
        return self.current

    def forward(self) -> str:
        """Move to the next page and return it."""
        if not self._forward:
            raise HistoryError("Cannot go forward")
        self._back.append(self.current)
        self.current = self._forward.pop()
        return self.current


def _commands(text: str) -> Iterator[tuple[str, str | None]]:
    """Yield (command, url) pairs; a visit takes the rest of its line as the URL."""
    pos = 0
    while (match := _WORD_PATTERN.match(text, pos)) is not None:
        word = match.group(1)
        pos = match.end()
        if word != "visit":
            yield word, None
            continue
        pos = min(pos + 1, len(text))
        newline = text.find("\n", pos)
        if newline < 0:
            url, pos = text[pos:], len(text)
        else:
            url, pos = text[pos:newline], newline + 1
        yield word, url


def run_commands(text: str) -> list[str]:
    """Run a script of visit/back/forward commands and return the report lines."""
    browser = BrowserHistory()
    lines: list[str] = []
    for command, url in _commands(text):
        try:
            if command == "visit":
                lines.append(f"Visited: {browser.visit(url or '')}")
            elif command == "back":
                lines.append(f"Went back to: {browser.back()}")
            elif command == "forward":
                lines.append(f"Went forward to: {browser.forward()}")
            else:
                lines.append(f"Unknown command: {command}")
        except HistoryError as exc:
            lines.append(str(exc))
    return lines


def main(argv: list[str] | None = None) -> int:
    """Read a command script and write the navigation report."""
    parser = argparse.ArgumentParser(description="Replay browser navigation commands.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Error: Could not open {args.input}", file=sys.stderr)
        return 1

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in run_commands(text))
    except OSError:
        print(f"Error: Could not open {args.output}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())