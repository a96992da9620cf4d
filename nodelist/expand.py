"""
Expansion of hostlist notation (e.g. 'cn[001-003,005],login1') into
explicit host names.
"""

import logging
import re

from nodelist.errors import (
    DuplicateBracketError,
    ExpansionLimitError,
    InvalidRangeBoundaryError,
    InvalidUnitTokenError,
    IsolatedBracketError,
)
from nodelist.utils import pad_number

log = logging.getLogger(__name__)

# Guard against ridiculously long expanded lists
MAX_EXPANDED_HOSTS = 1_000_000

_NUMBER = re.compile(r"[0-9]+")
_RANGE = re.compile(r"([0-9]+)-([0-9]+)")
_UNIT_SEPARATORS = re.compile(r"[\[,]")
# literal text, then one or more [...] groups, each optionally followed by literal text
_BRACKETED_TOKEN = re.compile(r"[^\[\]]*(?:\[[^\[\]]*\][^\[\]]*)+")


def _expand_unit(head: str, unit: str, token: str, max_hosts: int) -> list[str]:
    """Expand one bracket unit ('7', '007' or '001-012'), putting head before."""
    if _NUMBER.fullmatch(unit):
        return [head + unit]

    match = _RANGE.fullmatch(unit)
    if not match:
        if "-" in unit:
            raise InvalidRangeBoundaryError(token, f"'{unit}' is not a range of unsigned integers")
        raise InvalidUnitTokenError(token, f"'{unit}' is neither a number nor a range")

    s_start, s_end = match.groups()
    start, end = int(s_start), int(s_end)
    if start > end:
        raise InvalidRangeBoundaryError(token, f"range start {s_start} is greater than end {s_end}")
    if end - start + 1 > max_hosts:
        raise ExpansionLimitError(token, f"range '{unit}' exceeds the remaining {max_hosts} hosts")

    # every value keeps the width of the range start
    width = len(s_start)
    return [head + pad_number(i, width) for i in range(start, end + 1)]


def expand_nodelist(token: str, max_hosts: int = MAX_EXPANDED_HOSTS) -> list[str]:
    """
    Expand a single token holding bracket groups into explicit host names.

    'gpu[1-2]' -> ['gpu1', 'gpu2']
    'r[1-2]n[01,03].ib' -> ['r1n01.ib', 'r1n03.ib', 'r2n01.ib', 'r2n03.ib']

    Groups combine as a Cartesian product, the leftmost group being the
    outermost loop. Literal text around and between groups is kept as is.
    """
    *fragments, suffix = token.split("]")
    if not fragments:
        raise IsolatedBracketError(token, "no closing bracket")
    if "[" in suffix:
        raise IsolatedBracketError(token, "unclosed '['")

    results = [""]
    for fragment in fragments:
        n_open = fragment.count("[")
        if n_open == 0:
            raise IsolatedBracketError(token, f"no '[' before ']' in '{fragment}]'")
        if n_open > 1:
            raise DuplicateBracketError(token, f"nested brackets in '{fragment}]'")

        head, *units = _UNIT_SEPARATORS.split(fragment)
        # the product with results must stay within max_hosts
        budget = max_hosts // len(results)
        unit_list = []
        for unit in units:
            unit_list.extend(_expand_unit(head, unit, token, budget - len(unit_list)))
            if len(unit_list) > budget:
                raise ExpansionLimitError(token, f"more than {max_hosts} hosts")

        results = [left + right for left in results for right in unit_list]

    if suffix:
        results = [name + suffix for name in results]

    log.debug("expanded '%s' into %d hosts", token, len(results))
    return results


def split_hostlist(raw: str) -> list[str]:
    """
    Split a hostlist string at commas that are not inside brackets.

    Spaces are dropped first and empty tokens are skipped, so
    'cn[1,3], login1,' -> ['cn[1,3]', 'login1'].
    """
    tokens = []
    name = ""
    group = None  # open bracket content, None outside brackets

    # trailing comma flushes the last token
    for c in raw.replace(" ", "") + ",":
        if c == "[":
            if group is not None:
                raise DuplicateBracketError(raw, f"'[' opened inside '{group}'")
            group = c
        elif c == "]":
            if group is None:
                raise IsolatedBracketError(raw, f"']' without '[' after '{name}'")
            name += group + c
            group = None
        elif group is not None:
            group += c
        elif c == ",":
            tokens.append(name.strip())
            name = ""
        else:
            name += c

    if group is not None:
        raise IsolatedBracketError(raw, f"'{group.rstrip(',')}' is never closed")

    return [token for token in tokens if token]


def expand_hostlist(raw: str, max_hosts: int = MAX_EXPANDED_HOSTS) -> list[str]:
    """
    Expand a comma separated hostlist into explicit host names, in order.

    Tokens without brackets are taken verbatim; duplicates are kept.
    Raises a HostListError subclass (a ValueError) on malformed input.
    """
    hosts = []
    for token in split_hostlist(raw):
        if _BRACKETED_TOKEN.fullmatch(token):
            hosts.extend(expand_nodelist(token, max_hosts - len(hosts)))
        else:
            hosts.append(token)

        if len(hosts) > max_hosts:
            raise ExpansionLimitError(raw, f"more than {max_hosts} hosts")

    return hosts
