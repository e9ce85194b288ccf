# slstatus

A small status monitor. It gathers short pieces of system information, such as
CPU usage, memory, disk space, network speed, battery state, date and time and
the output of shell commands. It joins them into a single status line. The line
is written to standard output once per interval, so it can be piped into a
status bar.

Most components read Linux interfaces: `/proc`, `/sys`, netlink and OSS mixer
devices.

## Installation

```
pip install .
```

## Usage

```
slstatus -s     # print the status line every second
slstatus -1     # print the status line once and exit
slstatus -v     # print the version and exit
```

- `-s` writes the status line to standard output on every update.
- `-1` writes the status line once and exits. It implies `-s`.
- `-v` prints `slstatus-1.1` and exits.

Flags can be combined (`-s1`). Any other flag or argument prints the usage
message and exits with an error.

`SIGINT` and `SIGTERM` end the loop after the current update. `SIGUSR1`
starts the next update at once.

The status line shows the items returned by `slstatus.registry.default_args()`.
It is refreshed every 1000 ms. A component that cannot read its value is shown
as `n/a`. The line is cut off before it grows beyond 2048 bytes.

## What it does not do

- It does not set the name of the X root window. Started without `-s` or `-1`,
  `slstatus` exits with an error asking for `-s`.
- The layout cannot be changed from the command line or a configuration file.
  To use a different layout, build a list of `Arg` items in Python (see below).
- There are no components that ask the X server for the keyboard layout or the
  caps/num lock state. `slstatus.components.keyboard` only offers helpers that
  work on values already obtained: `get_layout(symbols, group)` picks a layout
  from an XKB symbols name, `valid_layout_or_variant(sym)` filters its tokens,
  and `format_indicators(fmt, led_mask)` renders lock states from an LED mask.

## Components

Each component takes one argument and returns a string, or `None` when the
value cannot be read. Each is registered under the name in the first column.

| Component | Shows | Argument |
|-----------|-------|----------|
| `battery_perc`, `battery_state`, `battery_remaining` | battery charge, state (`+`, `-`, `o`, `?`) and time left | battery name (`BAT0`) |
| `cat` | first line of a file | path |
| `cpu_freq`, `cpu_perc` | CPU frequency and usage since the previous call | unused |
| `datetime` | date and time | `strftime` format (`%F %T`) |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | disk space | mount point (`/`) |
| `entropy` | available kernel entropy | unused |
| `hostname`, `kernel_release`, `load_avg`, `uptime` | system information | unused |
| `gid`, `uid`, `username` | current user | unused |
| `ipv4`, `ipv6`, `up` | interface address and link state | interface name (`eth0`) |
| `netspeed_rx`, `netspeed_tx` | bytes per second since the previous call | interface name (`wlan0`) |
| `num_files` | number of entries in a directory | path |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | memory | unused |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap | unused |
| `run_command` | first line of a shell command's output | command |
| `temp` | temperature in °C from a millidegree sensor file | sensor file |
| `vol_perc` | OSS mixer volume in percent | mixer device (`/dev/mixer`) |
| `wifi_essid`, `wifi_perc` | Wi-Fi network name and signal quality | interface name (`wlan0`) |

Sizes are written with binary prefixes, for example `3.2 Gi`. The CPU frequency
uses decimal prefixes, for example `2.4 G`.

## Using it from Python

Components can be looked up by name and combined into a status line:

```python
from slstatus.cli import build_status
from slstatus.registry import Arg, default_args, get_component

print(get_component("datetime")("%H:%M"))
print(build_status(default_args(), "n/a", 2048))

items = [
    Arg(get_component("load_avg"), "load %s | "),
    Arg(get_component("ram_perc"), "ram %s%% | "),
    Arg(get_component("datetime"), "%s", "%F %T"),
]
print(build_status(items))
```

`get_component` raises `KeyError` for an unknown name. To print a custom layout
in a loop, pass it to `slstatus.cli.run`:

```python
import sys
from slstatus.cli import Options, run

run(Options(status_only=True), items, 2000, sys.stdout)
```

`fmt_human(num, base)` in `slstatus.util` formats numbers with decimal (`1000`)
or binary (`1024`) prefixes, the same way the components do. Any other base
raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```