import pytest

from redicmd.command import Command
from redicmd.sets import SetCommands


@pytest.fixture
def recorded():
    sent = []
    return sent, SetCommands(sent.append)


def test_sadd_flat_members(recorded):
    sent, cmds = recorded
    cmd = cmds.sadd("k", "a", "b")
    assert cmd.args == ["sadd", "k", "a", "b"]
    assert cmd.reply == "int"
    assert sent == [cmd]


def test_sadd_single_list_is_spread(recorded):
    _, cmds = recorded
    assert cmds.sadd("k", ["a", "b"]).args == ["sadd", "k", "a", "b"]


def test_srem_single_member(recorded):
    _, cmds = recorded
    assert cmds.srem("k", "a").args == ["srem", "k", "a"]


def test_smismember_reply_and_args(recorded):
    _, cmds = recorded
    cmd = cmds.smismember("k", "x", "y")
    assert cmd.args == ["smismember", "k", "x", "y"]
    assert cmd.reply == "bool_slice"


def test_smembers_and_map_share_args(recorded):
    _, cmds = recorded
    as_list = cmds.smembers("k")
    as_map = cmds.smembers_map("k")
    assert as_list.args == as_map.args == ["smembers", "k"]
    assert as_list.reply == "string_slice"
    assert as_map.reply == "string_struct_map"


@pytest.mark.parametrize(
    "method, name",
    [("sdiff", "sdiff"), ("sinter", "sinter"), ("sunion", "sunion")],
)
def test_multi_key_reads(recorded, method, name):
    _, cmds = recorded
    cmd = getattr(cmds, method)("a", "b", "c")
    assert cmd.args == [name, "a", "b", "c"]
    assert cmd.reply == "string_slice"


@pytest.mark.parametrize(
    "method, name",
    [
        ("sdiff_store", "sdiffstore"),
        ("sinter_store", "sinterstore"),
        ("sunion_store", "sunionstore"),
    ],
)
def test_store_variants(recorded, method, name):
    _, cmds = recorded
    cmd = getattr(cmds, method)("dest", "a", "b")
    assert cmd.args == [name, "dest", "a", "b"]
    assert cmd.reply == "int"


def test_pop_and_random_member(recorded):
    _, cmds = recorded
    assert cmds.spop("k").args == ["spop", "k"]
    assert cmds.spop_n("k", 3).args == ["spop", "k", 3]
    assert cmds.srand_member("k").args == ["srandmember", "k"]
    assert cmds.srand_member_n("k", 2).args == ["srandmember", "k", 2]


def test_smove_scard_sismember(recorded):
    _, cmds = recorded
    assert cmds.smove("s", "d", "m").args == ["smove", "s", "d", "m"]
    assert cmds.scard("k").args == ["scard", "k"]
    cmd = cmds.sismember("k", "m")
    assert cmd.args == ["sismember", "k", "m"]
    assert cmd.reply == "bool"


def test_processor_fills_value():
    def process(command: Command) -> None:
        command.val = len(command.args) - 2

    cmds = SetCommands(process)
    assert cmds.sadd("k", "a", "b", "c").val == 3