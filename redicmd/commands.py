"""The complete command set, and its stateful variant for single connections."""

from __future__ import annotations

from .bitscan import BitScanCommands
from .command import Command
from .hashlist import HashCommands, ListCommands
from .keyspace import KeyCommands
from .server import (
    ClusterCommands,
    GeoCommands,
    PubSubCommands,
    ScriptingCommands,
    ServerCommands,
)
from .sets import SetCommands
from .sortedsets import HyperLogLogCommands, SortedSetCommands
from .streams import StreamCommands


class Commands(
    KeyCommands,
    BitScanCommands,
    HashCommands,
    ListCommands,
    SetCommands,
    StreamCommands,
    SortedSetCommands,
    HyperLogLogCommands,
    ServerCommands,
    ScriptingCommands,
    PubSubCommands,
    ClusterCommands,
    GeoCommands,
):
    """Every command that can be sent through any client."""


class StatefulCommands(Commands):
    """Commands that change the state of the connection they are sent on."""

    def auth(self, password: str) -> Command:
        return self._run("status", "auth", password)

    def auth_acl(self, username: str, password: str) -> Command:
        """AUTH with a user name, for servers that use access control lists."""
        return self._run("status", "auth", username, password)

    def select(self, index: int) -> Command:
        return self._run("status", "select", index)

    def swap_db(self, index1: int, index2: int) -> Command:
        return self._run("status", "swapdb", index1, index2)

    def client_set_name(self, name: str) -> Command:
        """Assign a name to the connection."""
        return self._run("bool", "client", "setname", name)