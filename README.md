# redicmd

`redicmd` builds Redis commands. Each command method assembles the argument
list that Redis expects: option keywords in order, expirations converted to
seconds or milliseconds, and pairs taken from mappings. It wraps that list in a
`Command` and passes it to a callable that you supply. That callable might
send it over a connection, queue it in a pipeline or record it in a test.

The package also sorts Redis errors into kinds: retryable, bad connection,
`MOVED`/`ASK` redirection, loading and read-only. It can also render commands
as compact strings for logs and traces.

It needs Python 3.10 or newer and has no runtime dependencies.

## Building commands

`redicmd.commands.Commands` takes one argument, a function that receives each
`Command` built. The method returns the same `Command`.

```python
from datetime import timedelta

from redicmd.command import KEEP_TTL
from redicmd.commands import Commands
from redicmd.sortedsets import Z

sent = []
rdb = Commands(sent.append)

rdb.set("greeting", "hello", 0)                 # ["set", "greeting", "hello"]
rdb.set("greeting", "hello", timedelta(seconds=10))   # ... "ex", 10
rdb.set("greeting", "hello", 1.5)               # ... "px", 1500
rdb.set("greeting", "hello", KEEP_TTL)          # ... "keepttl"
rdb.hset("user:1", {"name": "Ada", "lang": "en"})
rdb.zadd("scores", Z(1.0, "alice"), Z(2.0, "bob"))

for cmd in sent:
    print(cmd.full_name(), cmd.args)
```

Each `Command` holds the following fields:

- `args`: the argument list.
- `reply`: a name for the kind of reply expected, such as `"status"`, `"int"`,
  `"string_slice"` or `"z_slice"`.
- `val` and `err`: for your callable to fill in.
- `read_timeout` and `first_key_pos`: for blocking commands and commands whose
  keys are not at position 1.
- `precision`: the unit of TTL-style replies.

`name()` returns the lower-cased command name. `full_name()` adds the
subcommand for `cluster` and `command`.

Durations are `timedelta` values or numbers of seconds:

- A zero expiration means the key gets no TTL.
- `redicmd.command.KEEP_TTL` sends `KEEPTTL`.
- A duration that is under one second, or not a whole number of seconds, uses
  the millisecond form (`PX`).
- A positive duration smaller than the unit is rounded up to 1, and a warning
  is logged.

`use_precise`, `format_ms`, `format_sec`, `expand_arg` and `expand_args` are
available from `redicmd.command`.

The command families live in their own modules. `Commands` combines all of
them:

| Module | Classes |
| --- | --- |
| `redicmd.keyspace` | `KeyCommands`, `Sort`, `SetArgs` |
| `redicmd.bitscan` | `BitScanCommands`, `BitCount` |
| `redicmd.hashlist` | `HashCommands`, `ListCommands`, `LPosArgs` |
| `redicmd.sets` | `SetCommands` |
| `redicmd.streams` | `StreamCommands`, `XAddArgs`, `XReadArgs`, `XReadGroupArgs`, `XPendingExtArgs`, `XClaimArgs` |
| `redicmd.sortedsets` | `SortedSetCommands`, `HyperLogLogCommands`, `Z`, `ZWithKey`, `ZStore`, `ZRangeBy` |
| `redicmd.server` | `ServerCommands`, `ScriptingCommands`, `PubSubCommands`, `ClusterCommands`, `GeoCommands` |

The option classes are dataclasses.

Some calls raise `ValueError` for an argument count the command does not
accept:

- `bit_pos` with more than two positions.
- `zpopmax` and `zpopmin` with more than one count.
- `memory_usage` with more than one sample count.

`shutdown` treats an `EOFError` from your callable as success. If the server
replies instead, the reply becomes the command's error.

`StatefulCommands` adds the commands that change the state of a connection:
`auth`, `auth_acl`, `select`, `swap_db` and `client_set_name`.

```python
from redicmd.commands import StatefulCommands

conn = StatefulCommands(sent.append)
password = "password"
conn.auth(password)
conn.select(2)
```

## Classifying errors

```python
from redicmd.errors import RedisError, is_moved_error, should_retry

err = RedisError("MOVED 3999 127.0.0.1:6381")
print(is_moved_error(err))     # (True, False, "127.0.0.1:6381")
print(should_retry(err, False))  # False
```

Retry and connection decisions:

- `should_retry` returns true for the following errors:
  - `EOFError`.
  - `OSError`.
  - `TimeoutError`, only when `retry_timeout` is set.
  - Replies starting with `LOADING`, `READONLY`, `CLUSTERDOWN` or `TRYAGAIN`.
  - The "max number of clients" reply.
- `is_bad_conn` tells whether a connection should be discarded. A server reply
  counts only when it is a `READONLY` error.

The module also has `is_redis_error`, `is_loading_error`, `is_read_only_error`
and `ClientClosedError`.

## Rendering commands for logs

```python
from redicmd.cmdstr import cmd_string, cmds_string, format_arg

print(cmd_string(sent[0]))      # "set greeting hello"
print(format_arg("foo\nbar"))   # "666f6f0a626172"
summary, text = cmds_string(sent)
```

How arguments and commands are rendered:

- Text made only of printable ASCII, without spaces, is shown as is. Anything
  else is hex-encoded.
- Arguments are cut to 64 bytes.
- At most 32 arguments after the command name are shown.
- A command's error, if it has one, is appended after `": "`.
- `cmds_string` returns two values:
  - a summary of at most ten distinct command names;
  - one line per command, for at most 101 commands.

## What it does not do

`redicmd` opens no connections. It does not encode the wire protocol, and it
does not parse replies. It has no connection pool, pipeline, cluster routing or
pub/sub receiver. Filling in a command's `val` or `err` is the job of the
callable you pass in.