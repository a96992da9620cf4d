"""
Compression of explicit host names back into hostlist notation.

Hosts sharing the same text around their first numeric run are grouped,
e.g. ['cn01', 'cn02', 'cn03', 'cn07'] -> ['cn[01-03,07]'].
"""

import logging
from typing import Iterable

from nodelist.utils import canonicalize_brackets, find_numeric_run, pad_number

log = logging.getLogger(__name__)


def _continues_run(first: str, last: str, number: str) -> bool:
    """True if number can extend the range first-last without changing its expansion."""
    # 'first-last' expands with the width of first, so '1-02' would come back as 1,2
    return int(number) == int(last) + 1 and number == pad_number(int(number), len(first))


def _render_run(first: str, last: str) -> str:
    if first == last:
        return first
    return f"{first}-{last}"


def _collect_bucket(head: str, tail: str, numbers: list[str]) -> str:
    # unique by text: '1' and '01' are different hosts
    numbers = sorted(set(numbers), key=lambda s: (len(s), int(s)))

    runs = []
    first = last = numbers[0]
    for number in numbers[1:]:
        if _continues_run(first, last, number):
            last = number
        else:
            runs.append(_render_run(first, last))
            first = last = number
    runs.append(_render_run(first, last))

    return canonicalize_brackets(f"{head}[{','.join(runs)}]{tail}")


def compress_hostlist(hosts: Iterable[str]) -> list[str]:
    """
    Compress explicit host names into as few hostlist entries as possible.

    Hosts without a number outside brackets are returned unchanged, first
    and in their original order. Grouped entries follow, one per
    (head, tail) pair in order of first appearance. Never fails.
    """
    hosts = list(hosts)
    if len(hosts) <= 1:
        return hosts

    ungrouped = []
    buckets: dict[tuple[str, str], list[str]] = {}
    for host in hosts:
        if not host:
            continue

        run = find_numeric_run(host)
        if run is None:
            ungrouped.append(host)
            continue

        start, end = run
        buckets.setdefault((host[:start], host[end:]), []).append(host[start:end])

    if not buckets:
        return ungrouped

    grouped = [
        _collect_bucket(head, tail, numbers)
        for (head, tail), numbers in buckets.items()
    ]
    log.debug("compressed %d hosts into %d entries", len(hosts), len(ungrouped) + len(grouped))
    return ungrouped + grouped


def collect_hostlist(hosts: Iterable[str]) -> str:
    """Return the compressed hosts as a single comma separated hostlist string."""
    return ",".join(compress_hostlist(hosts))
