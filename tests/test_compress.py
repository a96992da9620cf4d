from nodelist.compress import collect_hostlist, compress_hostlist
from nodelist.expand import expand_hostlist


def test_compress_contiguous_run():
    assert compress_hostlist(["cn01", "cn02", "cn03"]) == ["cn[01-03]"]


def test_compress_not_contiguous():
    assert compress_hostlist(["cn1", "cn3", "cn5"]) == ["cn[1,3,5]"]


def test_compress_unordered_with_duplicates():
    assert compress_hostlist(["cn07", "cn02", "cn01", "cn02", "cn03"]) == ["cn[01-03,07]"]


def test_compress_width_is_the_primary_sort_key():
    assert compress_hostlist(["n10", "n9", "n11", "n2"]) == ["n[2,9-11]"]


def test_compress_padding_makes_distinct_entries():
    assert compress_hostlist(["cn1", "cn01", "cn2"]) == ["cn[1-2,01]"]


def test_compress_run_never_changes_width_of_members():
    # 'n[1-02]' would expand to n1,n2
    assert compress_hostlist(["n1", "n02"]) == ["n[1,02]"]


def test_compress_groups_by_head_and_tail():
    hosts = ["cn1.ib", "gpu1", "cn2.ib", "gpu2", "cn3"]
    assert compress_hostlist(hosts) == ["cn[1-2].ib", "gpu[1-2]", "cn3"]


def test_compress_singleton_group_has_no_brackets():
    assert compress_hostlist(["cn5", "gpu01", "gpu02"]) == ["cn5", "gpu[01-02]"]


def test_compress_ungroupable_hosts_keep_order():
    assert compress_hostlist(["a", "b", "c"]) == ["a", "b", "c"]


def test_compress_ungrouped_hosts_come_first():
    assert compress_hostlist(["cn1", "login", "cn2", "head"]) == ["login", "head", "cn[1-2]"]


def test_compress_small_inputs():
    assert compress_hostlist([]) == []
    assert compress_hostlist(["cn[5]"]) == ["cn[5]"]
    assert compress_hostlist(iter(["cn1", "cn2"])) == ["cn[1-2]"]


def test_compress_skips_empty_names():
    assert compress_hostlist(["", "cn1", "", "cn2"]) == ["cn[1-2]"]


def test_compress_only_first_run_is_grouped():
    assert compress_hostlist(["r1n1", "r1n2", "r2n1"]) == ["r[1-2]n1", "r1n2"]


def test_collect_hostlist():
    assert collect_hostlist(["cn01", "cn02", "login"]) == "login,cn[01-02]"


def test_round_trip_on_sets():
    for hostlist in [
        "cn[001-003,005]",
        "n[1,02,3-4,010-012],login1,n99",
        "r[1-2]n[01,03].ib,gpu[9-11]",
        "x[0-1],x[00-01],y",
    ]:
        hosts = expand_hostlist(hostlist)
        assert set(expand_hostlist(collect_hostlist(hosts))) == set(hosts)
