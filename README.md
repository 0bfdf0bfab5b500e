# knxbuzzer

Building blocks for a KNX-controlled buzzer that plays RTTTL melodies:
decoding the device's KNX parameter block into melody configurations, the
data model for those configurations, a small work-queue scheduler and a
swappable, levelled logger. The package has no dependencies outside the
standard library.

## Modules

### `knxbuzzer.knx_params`

The layout of the parameter memory and the group object numbers.

- `KnxParameters(data)` wraps the raw parameter bytes. Data shorter than
  `PARAMETER_SIZE` (4129 bytes) is padded with zero bytes; longer data
  raises `ValueError`.
  - `param_byte(offset)` and `param_data(offset, size)` give raw access and
    raise `IndexError` outside the block.
  - `number_of_melodies()`, `melody_pause(index)`, `melody_rtttl(index)`,
    `melody_mode(index)`, `lower_temp_limit(index)`,
    `upper_temp_limit(index)` and `venting_duration(index)` decode the
    per-melody fields. Melody indices run from 1 to `MELODY_COUNT` (8);
    other indices raise `ValueError`. Temperature limits are signed bytes;
    the RTTTL text ends at the first NUL byte.
- `trigger_ko(index)`, `switch_ko(index)` and `temperature_ko(index)` give
  the group object numbers of melody `index` (1–8, 9–16 and 17–24).
- `param_delay(time)` decodes a 16-bit delay parameter into milliseconds.
- Constants: `OPENKNX_ID`, `APPLICATION_NUMBER`, `APPLICATION_VERSION`,
  `ORDER_NUMBER`, `PARAMETER_SIZE`, `MAX_KO_NUMBER`, `MELODY_COUNT`,
  `RTTTL_SIZE`.

### `knxbuzzer.knx_config`

- `KnxConfig(params).get_melody_configs()` returns one `MelodyConfig` per
  configured melody, highest index first, with the melody index as its
  priority. Mode selector 0 gives a `TriggerMode`, 1 a `SwitchMode`, any
  other value a `VentingMonitorMode`. If the melody count is not between 1
  and 8, a warning is logged and an empty list is returned.
- `KnxConfig.get_application_version()` returns an `ApplicationVersion`
  (`major`, `minor`); `str()` of it gives `"3.13"` for this application.

### `knxbuzzer.modes`

Frozen dataclasses describing a melody's configuration: `ModeType`
(`TRIGGER`, `SWITCH`, `VENTING_MONITOR`), `TriggerMode`, `SwitchMode`,
`VentingMonitorMode` (all with `mode_type()`), `Melody` (`rtttl`,
`pause_sec`) and `MelodyConfig` (`priority`, `mode`, `melody`). Group object
numbers must fit 16 bits, pauses, priorities and venting durations 8 bits;
out-of-range values raise `ValueError`.

### `knxbuzzer.scheduler`

Defers work from callback context to a main loop. `SimpleScheduler` is a
first-in, first-out queue that `process()` drains completely, including
work queued during the drain; `len()` gives the number of pending tasks.
`install_strategy(strategy)` makes a strategy process-wide and returns the
previous one; the module-level `schedule(task)` and `process()` use it, and
tasks scheduled while no strategy is installed are dropped. Custom
strategies subclass `SchedulerStrategy`.

### `knxbuzzer.logger`

`LogLevel` (`OFF`, `FATAL`, `ERROR`, `WARNING`, `INFO`, `TRACE`),
the `BaseLogger` interface, `DummyLogger` (discards everything) and
`StandardLogger(name)`, which writes through Python's `logging` module once
`init(level)` has been called, formats messages printf-style and cuts them
to 255 characters. `set_logger()` installs a process-wide logger,
`get_logger()` returns it or a shared `DummyLogger`, and `log_trace`,
`log_info`, `log_warning`, `log_error` and `log_fatal` log through it.

## Example

```python
from knxbuzzer.knx_config import KnxConfig
from knxbuzzer.knx_params import PARAMETER_SIZE, KnxParameters
from knxbuzzer.logger import LogLevel, StandardLogger, set_logger

logger = StandardLogger("knxbuzzer")
logger.init(LogLevel.INFO)
set_logger(logger)

data = bytearray(PARAMETER_SIZE)
data[0] = (1 << 4) | (1 << 2)      # one melody, melody 1 in switch mode
data[1] = 5 << 2                   # 5 s pause between repetitions
rtttl = b"beep:d=4,o=5,b=120:c,e,g"
data[9:9 + len(rtttl)] = rtttl

config = KnxConfig(KnxParameters(data))
print(config.get_application_version())   # 3.13
for cfg in config.get_melody_configs():
    print(cfg.priority, cfg.mode, cfg.melody)
# 1 SwitchMode(ko_number=9) Melody(rtttl='beep:d=4,o=5,b=120:c,e,g', pause_sec=5)
```

## What this package does not do

It contains no hardware access and no running application: there are no
timer, GPIO, buzzer or KNX stack drivers, no behaviours that react to group
object values and play melodies, no arbitration between melodies for the
buzzer, and no command or main loop to run. It provides the configuration,
parameter decoding, scheduling and logging pieces that such code would
build on.