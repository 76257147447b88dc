"""An interactive shell with command history and multi-stage pipelines."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import tempfile
from typing import IO, Iterator, Sequence

MAX_COMMANDS = 20
MAX_ARGS = 64
PROMPT_TAG = "MTL 458"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class History:
    """The commands entered so far, oldest first."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def add(self, command: str) -> None:
        """Append a command line."""
        self._entries.append(command)

    def last(self, n: int) -> list[str]:
        """The most recent ``n`` commands, oldest first; all if fewer."""
        if n < 0:
            raise ValueError("count must not be negative")
        n = min(n, len(self._entries))
        return self._entries[len(self._entries) - n :]

    def format(self, n: int) -> str:
        """The most recent ``n`` commands as numbered lines."""
        return "".join(
            f"{number}. {command}\n"
            for number, command in enumerate(self.last(n), start=1)
        )

    def clear(self) -> None:
        """Forget every command."""
        self._entries.clear()


def parse_count(arg: str) -> int:
    """Parse a non-negative whole number for the history builtin.

    Raises ValueError carrying the message to show the user.
    """
    match = _LEADING_INT.match(arg)
    if match is None:
        raise ValueError("Input incorrect: Not a valid integer")
    rest = arg[match.end() :]
    if rest:
        raise ValueError(f"Input incorrect: Invalid character: {rest[0]}")
    number = int(match.group())
    if number < 0:
        raise ValueError("Input incorrect: Negative number")
    return number


def split_args(command: str) -> list[str]:
    """Split a command on spaces, dropping empty words, at most MAX_ARGS."""
    return [word for word in command.split(" ") if word][:MAX_ARGS]


def split_pipeline(line: str) -> list[str]:
    """Split a line on ``|``, dropping empty pieces, at most MAX_COMMANDS."""
    return [piece for piece in line.split("|") if piece][:MAX_COMMANDS]


def change_directory(args: Sequence[str]) -> bool:
    """Handle ``cd``; ``~`` means the home directory. Returns success."""
    if len(args) < 2:
        print("cd: Missing argument", file=sys.stderr)
        return False
    target = args[1]
    if target == "~":
        home = os.environ.get("HOME")
        if home is None:
            print("cd: Failed to get home directory", file=sys.stderr)
            return False
        target = home
    try:
        os.chdir(target)
    except OSError as exc:
        print(f"cd: {target}: {exc.strerror}", file=sys.stderr)
        return False
    return True


def _history_request(args: Sequence[str]) -> int:
    return parse_count(args[1] if len(args) > 1 else "")


def run_command(args: Sequence[str], history: History) -> int:
    """Run one command: a builtin or an external program.

    ``exit`` clears the history and raises SystemExit. Returns the
    command's exit status.
    """
    if not args:
        return 0
    name = args[0]
    if name == "history":
        try:
            count = _history_request(args)
        except ValueError as exc:
            print(exc)
            return 1
        print(history.format(count), end="")
        return 0
    if name == "exit":
        history.clear()
        raise SystemExit(0)
    if name == "cd":
        return 0 if change_directory(args) else 1

    sys.stdout.flush()
    try:
        completed = subprocess.run(list(args), check=False)
    except OSError as exc:
        print(f"execvp: {exc.strerror}", file=sys.stderr)
        return 1
    if name == "cat":
        print(flush=True)
    return completed.returncode


def _builtin_stage(args: Sequence[str], history: History) -> str:
    """What a builtin pipeline stage writes to its output."""
    if args[0] == "exit":
        return ""
    try:
        count = _history_request(args)
    except ValueError as exc:
        return f"{exc}\n"
    raw = "".join(f"{command}\n" for command in history.last(count))
    return history.format(count) + raw


def _spool(data: bytes) -> IO[bytes]:
    spool = tempfile.TemporaryFile()
    spool.write(data)
    spool.seek(0)
    return spool


def _close(stream: IO[bytes] | None) -> None:
    if stream is not None:
        stream.close()


def run_pipeline(commands: Sequence[str], history: History) -> int:
    """Run the commands connected by pipes and wait for all of them.

    ``history`` and ``exit`` act as stages of their own; ``exit`` only
    ends its own stage. Returns the exit status of the last stage.
    """
    sys.stdout.flush()
    stages: list[subprocess.Popen[bytes] | int] = []
    upstream: IO[bytes] | None = None
    last_index = len(commands) - 1

    for index, command in enumerate(commands):
        last = index == last_index
        args = split_args(command)

        if args and args[0] in ("history", "exit"):
            text = _builtin_stage(args, history)
            _close(upstream)
            if last:
                sys.stdout.write(text)
                sys.stdout.flush()
                upstream = None
            else:
                upstream = _spool(text.encode("utf-8"))
            stages.append(0)
            continue

        process: subprocess.Popen[bytes] | None = None
        if args:
            try:
                process = subprocess.Popen(
                    args,
                    stdin=upstream,
                    stdout=None if last else subprocess.PIPE,
                )
            except OSError as exc:
                print(f"execvp: {exc.strerror}", file=sys.stderr)
        _close(upstream)

        if process is None:
            stages.append(1)
            upstream = None if last else _spool(b"")
        else:
            stages.append(process)
            upstream = process.stdout

    _close(upstream)
    statuses = [
        stage.wait() if isinstance(stage, subprocess.Popen) else stage
        for stage in stages
    ]
    return statuses[-1] if statuses else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read command lines from standard input until ``exit`` or end of input."""
    user = os.environ.get("USER", "")
    history = History()
    try:
        while True:
            print(f"{user}:{os.getcwd()} {PROMPT_TAG} > ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                return 0
            line = line.split("\n", 1)[0]
            if not line:
                continue
            history.add(line)
            commands = split_pipeline(line)
            if not commands:
                continue
            if len(commands) > 1:
                run_pipeline(commands, history)
            else:
                run_command(split_args(commands[0]), history)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())