"""Builders for server, scripting, pub/sub, cluster and geo commands."""

from __future__ import annotations

from typing import Any, Sequence

from .command import Cmdable, Command, Duration, expand_args, format_ms


class ServerCommands(Cmdable):
    """Server administration commands."""

    def bg_rewrite_aof(self) -> Command:
        return self._run("status", "bgrewriteaof")

    def bg_save(self) -> Command:
        return self._run("status", "bgsave")

    def client_kill(self, ip_port: str) -> Command:
        return self._run("status", "client", "kill", ip_port)

    def client_kill_by_filter(self, *args: str) -> Command:
        """CLIENT KILL <option> [value] ... <option> [value]."""
        return self._run("int", "client", "kill", *args)

    def client_list(self) -> Command:
        return self._run("string", "client", "list")

    def client_pause(self, duration: Duration) -> Command:
        return self._run("bool", "client", "pause", format_ms(duration))

    def client_id(self) -> Command:
        return self._run("int", "client", "id")

    def client_unblock(self, client_id: int) -> Command:
        return self._run("int", "client", "unblock", client_id)

    def client_unblock_with_error(self, client_id: int) -> Command:
        return self._run("int", "client", "unblock", client_id, "error")

    def config_get(self, parameter: str) -> Command:
        return self._run("slice", "config", "get", parameter)

    def config_reset_stat(self) -> Command:
        return self._run("status", "config", "resetstat")

    def config_set(self, parameter: str, value: str) -> Command:
        return self._run("status", "config", "set", parameter, value)

    def config_rewrite(self) -> Command:
        return self._run("status", "config", "rewrite")

    def db_size(self) -> Command:
        return self._run("int", "dbsize")

    def flush_all(self) -> Command:
        return self._run("status", "flushall")

    def flush_all_async(self) -> Command:
        return self._run("status", "flushall", "async")

    def flush_db(self) -> Command:
        return self._run("status", "flushdb")

    def flush_db_async(self) -> Command:
        return self._run("status", "flushdb", "async")

    def info(self, *args: str) -> Command:
        """INFO with an optional section; only the first section is sent."""
        return self._run("string", "info", *args[:1])

    def last_save(self) -> Command:
        return self._run("int", "lastsave")

    def save(self) -> Command:
        return self._run("status", "save")

    def _shutdown(self, modifier: str) -> Command:
        args: list[Any] = ["shutdown"]
        if modifier:
            args.append(modifier)
        command = self._run("status", *args)
        if command.err is not None:
            if isinstance(command.err, EOFError):
                # The server closed the connection: it quit as asked.
                command.err = None
        else:
            # The server did not quit; the reply holds the reason.
            command.err = RuntimeError(str(command.val or ""))
            command.val = ""
        return command

    def shutdown(self) -> Command:
        return self._shutdown("")

    def shutdown_save(self) -> Command:
        return self._shutdown("save")

    def shutdown_nosave(self) -> Command:
        return self._shutdown("nosave")

    def slave_of(self, host: str, port: str) -> Command:
        return self._run("status", "slaveof", host, port)

    def slow_log_get(self, num: int) -> Command:
        return self._run("slow_log", "slowlog", "get", num)

    def time(self) -> Command:
        return self._run("time", "time")

    def debug_object(self, key: str) -> Command:
        return self._run("string", "debug", "object", key)

    def read_only(self) -> Command:
        return self._run("status", "readonly")

    def read_write(self) -> Command:
        return self._run("status", "readwrite")

    def memory_usage(self, key: str, *args: int) -> Command:
        """MEMORY USAGE with an optional sample count."""
        line: list[Any] = ["memory", "usage", key]
        if args:
            if len(args) != 1:
                raise ValueError("MemoryUsage expects single sample count")
            line += ["SAMPLES", args[0]]
        return self._run("int", *line)


class ScriptingCommands(Cmdable):
    """Lua scripting commands."""

    def eval(self, script: str, keys: Sequence[str], *args: Any) -> Command:
        keys = list(keys)
        return self._run("cmd", "eval", script, len(keys), *keys, *expand_args(args))

    def eval_sha(self, sha1: str, keys: Sequence[str], *args: Any) -> Command:
        keys = list(keys)
        return self._run("cmd", "evalsha", sha1, len(keys), *keys, *expand_args(args))

    def script_exists(self, *args: str) -> Command:
        return self._run("bool_slice", "script", "exists", *args)

    def script_flush(self) -> Command:
        return self._run("status", "script", "flush")

    def script_kill(self) -> Command:
        return self._run("status", "script", "kill")

    def script_load(self, script: str) -> Command:
        return self._run("string", "script", "load", script)


class PubSubCommands(Cmdable):
    """Publishing and pub/sub introspection commands."""

    def publish(self, channel: str, message: Any) -> Command:
        """Post the message to the channel."""
        return self._run("int", "publish", channel, message)

    def pubsub_channels(self, pattern: str = "*") -> Command:
        args: list[Any] = ["pubsub", "channels"]
        if pattern != "*":
            args.append(pattern)
        return self._run("string_slice", *args)

    def pubsub_numsub(self, *args: str) -> Command:
        return self._run("string_int_map", "pubsub", "numsub", *args)

    def pubsub_numpat(self) -> Command:
        return self._run("int", "pubsub", "numpat")


class ClusterCommands(Cmdable):
    """Cluster management commands."""

    def cluster_slots(self) -> Command:
        return self._run("cluster_slots", "cluster", "slots")

    def cluster_nodes(self) -> Command:
        return self._run("string", "cluster", "nodes")

    def cluster_meet(self, host: str, port: str) -> Command:
        return self._run("status", "cluster", "meet", host, port)

    def cluster_forget(self, node_id: str) -> Command:
        return self._run("status", "cluster", "forget", node_id)

    def cluster_replicate(self, node_id: str) -> Command:
        return self._run("status", "cluster", "replicate", node_id)

    def cluster_reset_soft(self) -> Command:
        return self._run("status", "cluster", "reset", "soft")

    def cluster_reset_hard(self) -> Command:
        return self._run("status", "cluster", "reset", "hard")

    def cluster_info(self) -> Command:
        return self._run("string", "cluster", "info")

    def cluster_key_slot(self, key: str) -> Command:
        return self._run("int", "cluster", "keyslot", key)

    def cluster_get_keys_in_slot(self, slot: int, count: int) -> Command:
        return self._run("string_slice", "cluster", "getkeysinslot", slot, count)

    def cluster_count_failure_reports(self, node_id: str) -> Command:
        return self._run("int", "cluster", "count-failure-reports", node_id)

    def cluster_count_keys_in_slot(self, slot: int) -> Command:
        return self._run("int", "cluster", "countkeysinslot", slot)

    def cluster_del_slots(self, *args: int) -> Command:
        return self._run("status", "cluster", "delslots", *args)

    def cluster_del_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """CLUSTER DELSLOTS for every slot from ``min_slot`` to ``max_slot`` inclusive."""
        return self.cluster_del_slots(*range(min_slot, max_slot + 1))

    def cluster_save_config(self) -> Command:
        return self._run("status", "cluster", "saveconfig")

    def cluster_slaves(self, node_id: str) -> Command:
        return self._run("string_slice", "cluster", "slaves", node_id)

    def cluster_failover(self) -> Command:
        return self._run("status", "cluster", "failover")

    def cluster_add_slots(self, *args: int) -> Command:
        return self._run("status", "cluster", "addslots", *args)

    def cluster_add_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """CLUSTER ADDSLOTS for every slot from ``min_slot`` to ``max_slot`` inclusive."""
        return self.cluster_add_slots(*range(min_slot, max_slot + 1))


class GeoCommands(Cmdable):
    """Geospatial commands."""

    def geo_add(self, key: str, *args: Any) -> Command:
        """GEOADD from locations carrying ``longitude``, ``latitude`` and ``name``."""
        triples = [
            item
            for location in args
            for item in (location.longitude, location.latitude, location.name)
        ]
        return self._run("int", "geoadd", key, *triples)

    def geo_pos(self, key: str, *args: str) -> Command:
        return self._run("geo_pos", "geopos", key, *args)

    def geo_dist(self, key: str, member1: str, member2: str, unit: str = "") -> Command:
        """GEODIST; the unit defaults to kilometres."""
        return self._run("float", "geodist", key, member1, member2, unit or "km")

    def geo_hash(self, key: str, *args: str) -> Command:
        return self._run("string_slice", "geohash", key, *args)