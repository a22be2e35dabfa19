from __future__ import annotations

import re

_COMMAND = re.compile(r"([MmLlHhVvZzCcSsQqTtAa])([^MmLlHhVvZzCcSsQqTtAa]*)")


def split_commands(d: str) -> list[tuple[str, list[float]]]:
    """Split finite path data into (letter, numbers) pairs."""
    commands = []
    for letter, args in _COMMAND.findall(d):
        numbers = [float(tok) for tok in args.replace(",", " ").split()]
        commands.append((letter, numbers))
    return commands
