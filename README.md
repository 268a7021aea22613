# barstatus

barstatus builds a one-line system status string for a window-manager bar
and refreshes it once a second. Each item on the line is a small reader for
one value: CPU usage, RAM, battery state and charge, network throughput,
date and time, or the first line printed by a shell command. More readers
(disk, swap, Wi-Fi, load average, uptime and others) are available to use
from Python.

It reads Linux interfaces such as `/proc` and `/sys`, so it is meant for
Linux.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Print the status line to standard output, once per interval:

```
barstatus -s
```

Run without `-s` to set the line as the name of the X root window, which is
what dwm and similar window managers show in their bar:

```
barstatus
```

Without `-s` the display is taken from `DISPLAY`, and the cookie from
`XAUTHORITY` or `~/.Xauthority`. If no display can be opened, barstatus
prints an error and exits with status 1. Any option other than `-s`, or
any extra argument, prints a usage line and exits with status 1.

Stop it with Ctrl-C or SIGTERM. On exit it clears the root window name.

If a reader cannot produce a value, `n/a` is shown in its place. The line
is cut short if it would reach 2048 bytes.

## The status line

`barstatus.config.default_items()` returns the items of the line. Each is a
`StatusItem` holding a reader, a printf-style format and an optional
argument; `StatusItem.render(unknown)` runs the reader and formats its
value. The default line shows, in this order:

- sink volume, from a `pactl` shell command
- CPU usage
- RAM usage
- battery state glyph and charge for `BAT0`
- date and time (`%x|%I:%M`)
- receive and transmit speed for `wlp1s0`

`barstatus.cli.build_status(items, unknown, maxlen)` renders any list of
items into one string, and `barstatus.cli.parse_args(argv)` returns whether
`-s` was given.

## Readers

Each reader returns a string, or `None` when the value is not available:

| Module | Readers |
| --- | --- |
| `barstatus.cpu` | `cpu_perc`, `cpu_freq`, `CpuSampler` |
| `barstatus.memory` | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used`, `parse_meminfo` |
| `barstatus.battery` | `battery_perc`, `battery_state`, `battery_remaining`, `BatteryMonitor` |
| `barstatus.netspeeds` | `netspeed_rx`, `netspeed_tx`, `NetSpeedMeter` |
| `barstatus.wifi` | `wifi_perc`, `wifi_essid`, `WifiMonitor`, `parse_wireless` |
| `barstatus.volume` | `vol_perc` (OSS mixer device) |
| `barstatus.system` | `datetime`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `entropy`, `hostname`, `ipv4`, `ipv6`, `kernel_release`, `load_avg`, `num_files`, `temp`, `uptime`, `format_uptime`, `gid`, `uid`, `username` |
| `barstatus.command` | `run_command` |

Some readers keep state between calls. `cpu_perc`, `netspeed_rx` and
`netspeed_tx` compare with the previous reading, so they return `None` on
their first call. `battery_state` returns a glyph rather than a word.
`wifi_essid` returns a glyph that shows whether the interface reports an
ESSID, not the ESSID itself. `wifi_perc` returns an empty string while the
interface is down.

`barstatus.keyboard` has helpers for keyboard values: `get_layout` picks a
layout from an xkb symbols string, `valid_layout_or_variant` tests a symbol,
and `format_indicators` renders caps and num lock state from a format such
as `c?n?` and an LED mask.

`barstatus.util.fmt_human(num, base)` formats sizes with SI prefixes
(base 1000) or binary prefixes (base 1024), and raises `ValueError` for any
other base:

```python
>>> from barstatus.util import fmt_human
>>> fmt_human(2048, 1024)
'2Ki'
```

## Notifications

The battery and Wi-Fi readers send desktop notifications through
`dunstify`: low battery, full battery, charging, unknown battery state, and
Wi-Fi connecting or disconnecting. Each is sent once until the state
changes. If the notification command cannot be started, a warning is
printed to standard error and the reader carries on.

`run_command` runs `bash ~/scripts/volnotify` whenever the output of the
`amixer` volume command changes.

## What it does not do

- There is no configuration file; the line is changed by editing
  `default_items()` or by building your own list and calling
  `build_status`.
- The keyboard helpers do not talk to the X server; there is no reader for
  the current keymap or the lock LEDs.
- Volume is read only from OSS mixer devices; the default line uses a
  shell command for it instead.