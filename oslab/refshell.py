"""A small shell with a few builtins and support for a single pipe."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from typing import Sequence

MAX_WORDS = 100

_CLEAR_SCREEN = "\033[H\033[J"


def help_text() -> str:
    """The text shown by the ``help`` builtin."""
    return (
        "\n***WELCOME TO MY SHELL HELP***"
        "\n-Use the shell at your own risk..."
        "\nList of Commands supported:"
        "\n>cd"
        "\n>ls"
        "\n>exit"
        "\n>all other general commands available in UNIX shell"
        "\n>pipe handling"
        "\n>improper space handling"
    )


def _greeting() -> str:
    user = os.environ.get("USER", "")
    stars = "*" * 42
    return (
        f"\n\n\n\n{stars}"
        "\n\n\n\t****MY SHELL****"
        "\n\n\t-USE AT YOUR OWN RISK-"
        f"\n\n\n\n{stars}"
        f"\n\n\nUSER is: @{user}\n"
    )


def parse_pipe(line: str) -> tuple[str, str | None]:
    """Split at the first ``|``; the second part ends at any further ``|``.

    The second element is None when the line holds no pipe.
    """
    parts = line.split("|")
    return parts[0], (parts[1] if len(parts) > 1 else None)


def parse_words(text: str) -> list[str]:
    """Split on spaces, skipping empty words, keeping at most MAX_WORDS."""
    return [word for word in text.split(" ") if word][:MAX_WORDS]


def handle_builtin(words: Sequence[str]) -> bool:
    """Run ``exit``, ``cd``, ``help`` or ``hello``; False for anything else.

    ``exit`` says goodbye and raises SystemExit.
    """
    if not words:
        return False
    name = words[0]
    if name == "exit":
        print("\nGoodbye")
        raise SystemExit(0)
    if name == "cd":
        if len(words) > 1:
            try:
                os.chdir(words[1])
            except OSError:
                pass
        return True
    if name == "help":
        print(help_text())
        return True
    if name == "hello":
        user = os.environ.get("USER", "")
        print(
            f"\nHello {user}.\nMind that this is not a place to play around."
            "\nUse help to know more.."
        )
        return True
    return False


def process_line(line: str) -> tuple[list[str], list[str] | None] | None:
    """Parse a line and run it if it is a builtin.

    Returns None when nothing is left to run, otherwise the words of the
    command and, for a piped line, the words of the command it feeds.
    """
    first, second = parse_pipe(line)
    words = parse_words(first)
    piped = parse_words(second) if second is not None else None
    if not words or handle_builtin(words):
        return None
    return words, piped


def _run(words: list[str]) -> None:
    sys.stdout.flush()
    try:
        subprocess.run(words, check=False)
    except OSError as exc:
        print("\nCould not execute command..", flush=True)
        print(f"execvp: {exc.strerror}", file=sys.stderr)


def _run_piped(words: list[str], piped: list[str]) -> None:
    sys.stdout.flush()
    try:
        producer = subprocess.Popen(words, stdout=subprocess.PIPE)
    except OSError:
        print("\nCould not execute command 1..", flush=True)
        return
    assert producer.stdout is not None
    try:
        if not piped:
            raise FileNotFoundError
        consumer = subprocess.Popen(piped, stdin=producer.stdout)
    except OSError:
        print("\nCould not execute command 2..", flush=True)
        consumer = None
    producer.stdout.close()
    producer.wait()
    if consumer is not None:
        consumer.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Greet the user, then read and run command lines until ``exit``."""
    print(_greeting(), end="", flush=True)
    time.sleep(1)
    print(_CLEAR_SCREEN, end="", flush=True)
    try:
        while True:
            print(f"\nDir: {os.getcwd()}", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                return 0
            parsed = process_line(line.rstrip("\n"))
            if parsed is None:
                continue
            words, piped = parsed
            if piped is None:
                _run(words)
            else:
                _run_piped(words, piped)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())