"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_chain"
title = "Leveled logging with placeholder interpolation and chained handlers"
version = "0.1.0"
shell_command = "lib_log_chain"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner line by line.

    Parameters
    ----------
    writer:
        Callable receiving each line (with trailing newline); defaults to
        printing to stdout.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["name", "print_info", "shell_command", "title", "version"]
