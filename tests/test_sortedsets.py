from datetime import timedelta

import pytest

from redicmd.sortedsets import (
    HyperLogLogCommands,
    SortedSetCommands,
    Z,
    ZRangeBy,
    ZStore,
    ZWithKey,
)


@pytest.fixture
def sent():
    return []


@pytest.fixture
def zs(sent):
    return SortedSetCommands(sent.append)


@pytest.fixture
def hll(sent):
    return HyperLogLogCommands(sent.append)


def test_zadd_pairs_scores_and_members(zs, sent):
    cmd = zs.zadd("myzset", Z(1.0, "one"), Z(2.5, "two"))
    assert cmd.args == ["zadd", "myzset", 1.0, "one", 2.5, "two"]
    assert cmd.reply == "int"
    assert sent == [cmd]


@pytest.mark.parametrize(
    "method, flags",
    [
        ("zadd_nx", ["nx"]),
        ("zadd_xx", ["xx"]),
        ("zadd_ch", ["ch"]),
        ("zadd_nx_ch", ["nx", "ch"]),
        ("zadd_xx_ch", ["xx", "ch"]),
    ],
)
def test_zadd_flags(zs, method, flags):
    cmd = getattr(zs, method)("k", Z(3.0, "m"))
    assert cmd.args == ["zadd", "k", *flags, 3.0, "m"]


@pytest.mark.parametrize(
    "method, flags",
    [("zincr", ["incr"]), ("zincr_nx", ["incr", "nx"]), ("zincr_xx", ["incr", "xx"])],
)
def test_zincr_variants(zs, method, flags):
    cmd = getattr(zs, method)("k", Z(4.0, "m"))
    assert cmd.args == ["zadd", "k", *flags, 4.0, "m"]
    assert cmd.reply == "float"


def test_bzpopmax_puts_timeout_last(zs):
    cmd = zs.bzpopmax(timeout := timedelta(seconds=5), "a", "b")
    assert cmd.args == ["bzpopmax", "a", "b", 5]
    assert cmd.read_timeout == timeout
    assert cmd.reply == "z_with_key"


def test_bzpopmin_rounds_short_timeout_up(zs):
    cmd = zs.bzpopmin(timedelta(milliseconds=10), "a")
    assert cmd.args == ["bzpopmin", "a", 1]


def test_zinter_store_with_weights_and_aggregate(zs):
    store = ZStore(keys=["a", "b"], weights=[2.0, 3.0], aggregate="max")
    cmd = zs.zinter_store("out", store)
    assert cmd.args == ["zinterstore", "out", 2, "a", "b", "weights", 2.0, 3.0, "aggregate", "max"]
    assert cmd.first_key_pos == 3


def test_zunion_store_plain(zs):
    cmd = zs.zunion_store("out", ZStore(keys=["a"]))
    assert cmd.args == ["zunionstore", "out", 1, "a"]
    assert cmd.first_key_pos == 3


def test_zpop_optional_count(zs):
    assert zs.zpopmax("k").args == ["zpopmax", "k"]
    assert zs.zpopmin("k", 2).args == ["zpopmin", "k", 2]


def test_zpop_rejects_several_counts(zs, sent):
    with pytest.raises(ValueError, match="too many arguments"):
        zs.zpopmax("k", 1, 2)
    assert sent == []


def test_range_by_score_with_limit(zs):
    opt = ZRangeBy(min="-inf", max="+inf", offset=1, count=2)
    assert zs.zrange_by_score("k", opt).args == ["zrangebyscore", "k", "-inf", "+inf", "limit", 1, 2]
    with_scores = zs.zrange_by_score_with_scores("k", opt)
    assert with_scores.args == ["zrangebyscore", "k", "-inf", "+inf", "withscores", "limit", 1, 2]
    assert with_scores.reply == "z_slice"


def test_range_by_lex_without_limit(zs):
    opt = ZRangeBy(min="[a", max="[c")
    assert zs.zrange_by_lex("k", opt).args == ["zrangebylex", "k", "[a", "[c"]


def test_reverse_ranges_swap_bounds(zs):
    opt = ZRangeBy(min="0", max="10")
    assert zs.zrevrange_by_score("k", opt).args == ["zrevrangebyscore", "k", "10", "0"]
    assert zs.zrevrange_by_lex("k", opt).args == ["zrevrangebylex", "k", "10", "0"]
    assert zs.zrevrange_by_score_with_scores("k", opt).args == [
        "zrevrangebyscore", "k", "10", "0", "withscores"
    ]


def test_plain_ranges(zs):
    assert zs.zrange("k", 0, -1).args == ["zrange", "k", 0, -1]
    assert zs.zrange_with_scores("k", 0, -1).args[-1] == "withscores"
    assert zs.zrevrange("k", 0, -1).args == ["zrevrange", "k", 0, -1]
    assert zs.zrevrange_with_scores("k", 0, -1).reply == "z_slice"


def test_zrem_accepts_a_list(zs):
    assert zs.zrem("k", ["a", "b"]).args == ["zrem", "k", "a", "b"]
    assert zs.zrem("k", "a", "b").args == ["zrem", "k", "a", "b"]


def test_simple_commands(zs):
    assert zs.zcard("k").args == ["zcard", "k"]
    assert zs.zcount("k", "1", "2").args == ["zcount", "k", "1", "2"]
    assert zs.zlexcount("k", "-", "+").args == ["zlexcount", "k", "-", "+"]
    assert zs.zincr_by("k", 2.0, "m").args == ["zincrby", "k", 2.0, "m"]
    assert zs.zmscore("k", "a", "b").reply == "float_slice"
    assert zs.zrank("k", "m").args == ["zrank", "k", "m"]
    assert zs.zrevrank("k", "m").args == ["zrevrank", "k", "m"]
    assert zs.zscore("k", "m").reply == "float"
    assert zs.zrem_range_by_rank("k", 0, 1).args == ["zremrangebyrank", "k", 0, 1]
    assert zs.zrem_range_by_score("k", "1", "2").args == ["zremrangebyscore", "k", "1", "2"]
    assert zs.zrem_range_by_lex("k", "[a", "[b").args == ["zremrangebylex", "k", "[a", "[b"]


def test_zrand_member(zs):
    assert zs.zrand_member("k", 0, False).args == ["zrandmember", "k", 0]
    assert zs.zrand_member("k", 3, True).args == ["zrandmember", "k", 3, "withscores"]


def test_zdiff_counts_keys(zs):
    assert zs.zdiff("a", "b").args == ["zdiff", 2, "a", "b"]
    cmd = zs.zdiff_with_scores("a", "b")
    assert cmd.args == ["zdiff", 2, "a", "b", "withscores"]
    assert cmd.reply == "z_slice"


def test_zwithkey_carries_score_member_and_key():
    z = ZWithKey(score=1.5, member="m", key="k")
    assert (z.score, z.member, z.key) == (1.5, "m", "k")
    assert isinstance(z, Z)


def test_hyperloglog(hll):
    assert hll.pfadd("h", "a", "b").args == ["pfadd", "h", "a", "b"]
    assert hll.pfadd("h", ["a", "b"]).args == ["pfadd", "h", "a", "b"]
    assert hll.pfcount("h1", "h2").args == ["pfcount", "h1", "h2"]
    merged = hll.pfmerge("dest", "h1", "h2")
    assert merged.args == ["pfmerge", "dest", "h1", "h2"]
    assert merged.reply == "status"