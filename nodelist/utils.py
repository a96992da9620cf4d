"""
Utility functions for working with Slurm-style node names.

Currently includes:
- find_numeric_run: locates the first run of digits outside any bracket
  pair (e.g. 'cn' + '012' + '.ib' for 'cn012.ib').
- canonicalize_brackets: drops brackets around a single value
  (e.g. 'cn[5]' -> 'cn5').
- pad_number: renders a number with a minimum zero-padded width.
- readable_memory: formats a byte count as B/K/M/G.
"""

DIGITS = "0123456789"


def find_numeric_run(host: str) -> tuple[int, int] | None:
    """
    Return (start, end) offsets of the first run of ASCII digits that lies
    outside any bracket pair, or None when there is no such run.
    """
    depth = 0
    start = None
    for i, c in enumerate(host):
        if c == "[":
            depth += 1
        elif c == "]":
            depth = max(depth - 1, 0)

        if start is None:
            if depth == 0 and c in DIGITS:
                start = i
        elif c not in DIGITS:
            return start, i

    if start is None:
        return None
    return start, len(host)


def canonicalize_brackets(name: str) -> str:
    """Remove bracket pairs whose content has neither '-' nor ','."""
    pos = 0
    while True:
        left = name.find("[", pos)
        if left < 0:
            break
        right = name.find("]", left)
        if right < 0:
            break

        inner = name[left + 1:right]
        if "-" in inner or "," in inner:
            pos = right + 1
        else:
            name = name[:left] + inner + name[right + 1:]
            pos = left
    return name


def pad_number(value: int, width: int) -> str:
    """Render value left-padded with zeros to at least width characters."""
    return f"{value:0{width}d}"


def readable_memory(n_bytes: int) -> str:
    if n_bytes < 1024:
        return f"{n_bytes}B"
    elif n_bytes < 1024 ** 2:
        return f"{n_bytes // 1024}K"
    elif n_bytes < 1024 ** 3:
        return f"{n_bytes // 1024 ** 2}M"
    return f"{n_bytes // 1024 ** 3}G"
