import pandas as pd
import pytest

from nodelist.errors import HostListError
from nodelist.frames import compress_node_column, expand_node_column, explode_nodes, read_node_table

SACCT = (
    "JobID|User|Partition|NodeList\n"
    "101|alice|gpu|gpu[01-02]\n"
    "102|bob|cpu|cn[1,3],login1\n"
    "103|bob|cpu|None assigned\n"
)


def test_read_node_table_file(tmp_path):
    path = tmp_path / "JobList_2025_01_01.txt"
    path.write_text(SACCT)

    df = read_node_table(path)
    assert list(df.columns) == ["jobid", "user", "partition", "nodelist"]
    assert df["jobid"].tolist() == ["101", "102", "103"]


def test_read_node_table_dir(tmp_path):
    (tmp_path / "b.txt").write_text("JobID|NodeList\n2|cn2\n")
    (tmp_path / "a.txt").write_text("JobID|NodeList\n1|cn1\n")
    (tmp_path / "notes.md").write_text("ignored")

    df = read_node_table(tmp_path)
    assert df["jobid"].tolist() == ["1", "2"]


def test_read_node_table_empty_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_node_table(tmp_path)


def test_expand_node_column(tmp_path):
    path = tmp_path / "jobs.txt"
    path.write_text(SACCT)

    df = expand_node_column(read_node_table(path))
    assert df["nodelist"].tolist() == [["gpu01", "gpu02"], ["cn1", "cn3", "login1"], []]


def test_expand_node_column_missing_values():
    df = pd.DataFrame({"nodelist": ["cn[1-2]", None]})
    assert expand_node_column(df)["nodelist"].tolist() == [["cn1", "cn2"], []]


def test_expand_node_column_bad_value():
    df = pd.DataFrame({"nodes": ["cn[1-"]})
    with pytest.raises(HostListError):
        expand_node_column(df, "nodes")


def test_explode_nodes():
    df = pd.DataFrame({"jobid": ["1", "2", "3"], "nodelist": ["cn[1-2]", "gpu1", "(null)"]})

    nodes = explode_nodes(expand_node_column(df))
    assert nodes["jobid"].tolist() == ["1", "1", "2"]
    assert nodes["nodelist"].tolist() == ["cn1", "cn2", "gpu1"]


def test_compress_node_column():
    df = pd.DataFrame({
        "partition": ["cpu", "gpu", "cpu", "cpu", "gpu"],
        "node": ["cn01", "gpu1", "cn02", "cn04", "gpu2"],
    })

    summary = compress_node_column(df, "partition")
    assert summary.to_dict("records") == [
        {"partition": "cpu", "node": "cn[01-02,04]"},
        {"partition": "gpu", "node": "gpu[1-2]"},
    ]
