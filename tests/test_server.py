from datetime import timedelta
from types import SimpleNamespace

import pytest

from redicmd.errors import RedisError
from redicmd.server import (
    ClusterCommands,
    GeoCommands,
    PubSubCommands,
    ScriptingCommands,
    ServerCommands,
)


class _Recorder:
    """Collects processed commands and fills in a canned reply."""

    def __init__(self, val=None, err=None):
        self.sent = []
        self.val = val
        self.err = err

    def __call__(self, command):
        self.sent.append(command)
        command.val = self.val
        command.err = self.err


def test_simple_server_commands():
    recorder = _Recorder()
    client = ServerCommands(recorder)
    client.bg_rewrite_aof()
    client.bg_save()
    client.flush_all_async()
    client.flush_db()
    client.config_set("maxmemory", "1mb")
    assert [c.args for c in recorder.sent] == [
        ["bgrewriteaof"],
        ["bgsave"],
        ["flushall", "async"],
        ["flushdb"],
        ["config", "set", "maxmemory", "1mb"],
    ]


def test_client_pause_uses_milliseconds():
    client = ServerCommands(_Recorder())
    command = client.client_pause(timedelta(seconds=2))
    assert command.args == ["client", "pause", 2000]


def test_client_kill_by_filter_and_unblock():
    client = ServerCommands(_Recorder())
    assert client.client_kill_by_filter("type", "pubsub").args == [
        "client", "kill", "type", "pubsub"
    ]
    assert client.client_unblock_with_error(7).args == ["client", "unblock", 7, "error"]


def test_info_sends_only_first_section():
    client = ServerCommands(_Recorder())
    assert client.info().args == ["info"]
    assert client.info("replication", "memory").args == ["info", "replication"]


def test_memory_usage_samples():
    client = ServerCommands(_Recorder())
    assert client.memory_usage("k").args == ["memory", "usage", "k"]
    assert client.memory_usage("k", 5).args == ["memory", "usage", "k", "SAMPLES", 5]


def test_memory_usage_rejects_several_samples():
    recorder = _Recorder()
    client = ServerCommands(recorder)
    with pytest.raises(ValueError):
        client.memory_usage("k", 1, 2)
    assert recorder.sent == []


def test_shutdown_eof_is_success():
    client = ServerCommands(_Recorder(err=EOFError()))
    command = client.shutdown()
    assert command.args == ["shutdown"]
    assert command.err is None


def test_shutdown_reply_becomes_error():
    client = ServerCommands(_Recorder(val="Errors trying to SHUTDOWN"))
    command = client.shutdown_save()
    assert command.args == ["shutdown", "save"]
    assert str(command.err) == "Errors trying to SHUTDOWN"
    assert command.val == ""


def test_shutdown_other_error_is_kept():
    failure = RedisError("ERR unknown")
    client = ServerCommands(_Recorder(err=failure))
    command = client.shutdown_nosave()
    assert command.args == ["shutdown", "nosave"]
    assert command.err is failure


def test_slow_log_and_time():
    client = ServerCommands(_Recorder())
    assert client.slow_log_get(10).args == ["slowlog", "get", 10]
    assert client.time().args == ["time"]


def test_eval_counts_keys_and_expands_args():
    client = ScriptingCommands(_Recorder())
    command = client.eval("return 1", ["a", "b"], "x", "y")
    assert command.args == ["eval", "return 1", 2, "a", "b", "x", "y"]
    command = client.eval_sha("abc", [], ["p", "q"])
    assert command.args == ["evalsha", "abc", 0, "p", "q"]


def test_script_commands():
    client = ScriptingCommands(_Recorder())
    assert client.script_exists("h1", "h2").args == ["script", "exists", "h1", "h2"]
    assert client.script_load("return 1").args == ["script", "load", "return 1"]
    assert client.script_flush().args == ["script", "flush"]


def test_pubsub_channels_pattern():
    client = PubSubCommands(_Recorder())
    assert client.pubsub_channels("*").args == ["pubsub", "channels"]
    assert client.pubsub_channels("news.*").args == ["pubsub", "channels", "news.*"]
    assert client.pubsub_numsub("a", "b").args == ["pubsub", "numsub", "a", "b"]
    assert client.publish("ch", "hello").args == ["publish", "ch", "hello"]


def test_cluster_slot_ranges_are_inclusive():
    client = ClusterCommands(_Recorder())
    added = client.cluster_add_slots_range(3, 6)
    assert added.args[:2] == ["cluster", "addslots"]
    assert added.args[2:] == list(range(3, 7))
    deleted = client.cluster_del_slots_range(10, 10)
    assert deleted.args == ["cluster", "delslots", 10]


def test_cluster_simple_commands():
    client = ClusterCommands(_Recorder())
    assert client.cluster_reset_hard().args == ["cluster", "reset", "hard"]
    assert client.cluster_count_failure_reports("n1").args == [
        "cluster", "count-failure-reports", "n1"
    ]
    assert client.cluster_get_keys_in_slot(1, 2).args == ["cluster", "getkeysinslot", 1, 2]


def test_geo_add_flattens_locations():
    client = GeoCommands(_Recorder())
    first = SimpleNamespace(longitude=13.361389, latitude=38.115556, name="Palermo")
    second = SimpleNamespace(longitude=15.087269, latitude=37.502669, name="Catania")
    command = client.geo_add("Sicily", first, second)
    assert command.args == [
        "geoadd", "Sicily",
        13.361389, 38.115556, "Palermo",
        15.087269, 37.502669, "Catania",
    ]


def test_geo_dist_defaults_to_km():
    client = GeoCommands(_Recorder())
    assert client.geo_dist("Sicily", "a", "b", "").args == ["geodist", "Sicily", "a", "b", "km"]
    assert client.geo_dist("Sicily", "a", "b", "m").args[-1] == "m"
    assert client.geo_hash("Sicily", "a").args == ["geohash", "Sicily", "a"]
    assert client.geo_pos("Sicily", "a", "b").args == ["geopos", "Sicily", "a", "b"]