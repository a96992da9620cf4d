"""
pandas helpers for node lists found in Slurm output.

This module provides convenience utilities for tables read from
pipe-separated `sacct -P` / `sinfo` output:

- read_node_table: loads one file, or every *.txt file of a directory
- expand_node_column: turns compact node lists into lists of host names
- explode_nodes: one row per host
- compress_node_column: collects the hosts of each group back into
  hostlist notation
"""

from pathlib import Path

import pandas as pd

from nodelist.compress import collect_hostlist
from nodelist.expand import MAX_EXPANDED_HOSTS, expand_hostlist

# what sacct prints for jobs that never got nodes
EMPTY_NODELISTS = {"", "None assigned", "(null)"}


def read_node_table(path, sep: str = "|") -> pd.DataFrame:
    """Read scheduler output with every column as str and lower-cased column names."""
    path = Path(path)

    if path.is_file():
        df = pd.read_csv(path, sep=sep, dtype=str)
    else:
        files = sorted(path.glob("*.txt"))
        if not files:
            raise FileNotFoundError(f"No *.txt files found in {path}")
        df = pd.concat([pd.read_csv(f, sep=sep, dtype=str) for f in files], ignore_index=True)

    return df.rename(columns=str.lower)


def _expand_cell(value, max_hosts: int) -> list[str]:
    if pd.isna(value) or str(value).strip() in EMPTY_NODELISTS:
        return []
    return expand_hostlist(str(value), max_hosts=max_hosts)


def expand_node_column(df: pd.DataFrame, column: str = "nodelist",
                       max_hosts: int = MAX_EXPANDED_HOSTS) -> pd.DataFrame:
    """Replace hostlist strings in column with lists of explicit host names."""
    return df.assign(**{
        column: lambda d: d[column].apply(_expand_cell, max_hosts=max_hosts)
    })


def explode_nodes(df: pd.DataFrame, column: str = "nodelist") -> pd.DataFrame:
    """One row per host of an expanded column; rows without hosts are dropped."""
    return (
        df.explode(column)
          .dropna(subset=[column])
          .reset_index(drop=True)
    )


def compress_node_column(df: pd.DataFrame, by, column: str = "node") -> pd.DataFrame:
    """Collect the hosts in column for each group of by into one hostlist string."""
    return (
        df.groupby(by, sort=False)[column]
          .agg(lambda hosts: collect_hostlist(hosts.dropna().astype(str)))
          .reset_index()
    )
