# jetmon

Monitoring for NVIDIA Jetson boards. It reads what the Linux kernel
exposes under `/sys` and `/proc`, and it uses `nvidia-smi` to list GPU
processes.

jetmon reads:

- **Power rails** from INA3221 sensors under `/sys/bus/i2c/devices`.
  For each `iio:device*` entry it reads the first channel: the rail name
  from `in0_label`, or `in0` if the device `name` contains `ina3221`.
  It reports current (µA), voltage (µV) and power (mW) for each rail,
  and the total in watts.
- **Thermal zones** from `/sys/class/thermal`. For each `thermal_zone*`
  it reports the current, trip-point-0 and critical temperatures in °C.
  It picks out the CPU, GPU, PMIC and board readings by zone name.
- **Processes**: the number of numeric directories in `/proc`, and the
  GPU processes that `nvidia-smi pmon -c 1` reports.

When a sysfs directory is missing, as on a machine that is not a Jetson,
the readers return empty statistics and raise no error. If `nvidia-smi`
cannot be started, `read_process_stats` returns no GPU processes.
`get_gpu_processes` raises `OSError` in that case.

## Reading statistics

```python
from jetmon.power import read_power_stats
from jetmon.temperature import read_temperature_stats
from jetmon.processes import read_process_stats

power = read_power_stats("/sys/bus/i2c/devices")
print(f"Total: {power.total:.2f}W")
for rail in power.rails:
    print(rail.name, rail.current, rail.voltage, rail.power)

temps = read_temperature_stats("/sys/class/thermal")
print(f"CPU {temps.cpu:.1f}°C, GPU {temps.gpu:.1f}°C")
for zone in temps.thermal_zones:
    print(zone.index, zone.name, zone.current_temp, zone.critical_temp)

procs = read_process_stats("/proc")
print(procs.total_processes, "processes")
for proc in procs.gpu_processes:
    print(proc.pid, proc.name, proc.gpu_usage)
```

Each reader's path argument has the system location as its default.

`PowerStats`, `TemperatureStats` and `ProcessStats` convert to and from
JSON through `to_json()` and `from_json()`:

```python
from jetmon.power import PowerStats

again = PowerStats.from_json(power.to_json())
```

Other helpers:

- `jetmon.power.total_power(rails)` sums the rail power and returns watts.
- `jetmon.temperature.TemperatureStats.from_zones(zones)` builds stats
  from zones. Where several zones match a category, the last one wins.
- `jetmon.processes.parse_pmon_output(text)` parses `nvidia-smi pmon`
  output that has already been captured.
- `jetmon.processes.has_gpu_device_fd(pid)` tells whether a process has
  an NVIDIA device file open.
- `jetmon.processes.get_process_memory(pid)` returns a process's
  resident set size in bytes.

## Text screens

Each screen class takes its statistics through `update()`. Its
`render()` returns the screen as a list of text lines. A screen that has
not been updated yet returns a loading message.

| Module | Screen | Statistics |
| --- | --- | --- |
| `jetmon.dashboard` | `AllScreen` | `JetsonStats` |
| `jetmon.cpu_screen` | `CpuScreen` | `CpuScreenStats` |
| `jetmon.gpu_screen` | `GpuScreen` | `GpuScreenStats` |
| `jetmon.power_screen` | `PowerScreen` | `PowerScreenStats` |
| `jetmon.temperature_screen` | `TemperatureScreen` | `TemperatureScreenStats` |
| `jetmon.control_screen` | `ControlScreen` | `ControlStats` |
| `jetmon.info_screen` | `InfoScreen` | `InfoStats` |

Two of these are built straight from the readers:
`PowerScreenStats.from_stats` and `TemperatureScreenStats.from_stats`.

```python
from jetmon.temperature_screen import TemperatureScreen, TemperatureScreenStats

screen = TemperatureScreen()
screen.update(TemperatureScreenStats.from_stats(temps))
print("\n".join(screen.render()))
```

`ControlScreen.handle_key()` takes `"up"`, `"down"` or `"enter"`. Up and
down move the selection over its three items; `">> "` marks the
selected item. Enter returns the label of the selected item: `"Fan Speed"`,
`"Jetson Clocks"` or `"NVP Model"`. It changes no hardware setting.

## What jetmon does not do

- It has no command and no interactive terminal program. The screens
  only produce text lines, and the caller decides where to show them.
- It has no key handling or navigation between screens. The only key
  handling is the selection on `ControlScreen`.
- It does not read CPU, GPU, fan, memory or board information.
  The caller fills in `CpuScreenStats`, `GpuScreenStats`, `InfoStats`
  and the CPU, GPU, memory, fan and board parts of `JetsonStats`.
- It has no memory screen. The dashboard shows RAM use only.