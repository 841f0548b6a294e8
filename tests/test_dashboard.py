import pytest

from jetmon.cpu_screen import SimpleCpuStats, SimpleFanStats
from jetmon.dashboard import AllScreen, JetsonStats, SimpleMemoryStats
from jetmon.gpu_screen import SimpleGpuStats
from jetmon.info_screen import SimpleBoardInfo
from jetmon.power_screen import SimplePowerStats
from jetmon.temperature_screen import SimpleTemperatureStats


def make_stats(cpu_usage=50.0, ram_used=4096, ram_total=8192):
    return JetsonStats(
        cpu=SimpleCpuStats(usage=cpu_usage, frequency=2000),
        gpu=SimpleGpuStats(usage=60.0, frequency=1500),
        memory=SimpleMemoryStats(
            ram_used=ram_used, ram_total=ram_total, swap_used=0, swap_total=8192
        ),
        fan=SimpleFanStats(speed=50),
        temperature=SimpleTemperatureStats(cpu=45.0, gpu=50.0),
        power=SimplePowerStats(total=10.5),
        board=SimpleBoardInfo(model="Jetson Orin", jetpack="6.0", l4t="36.3"),
    )


def test_all_screen_initialization():
    screen = AllScreen()
    assert screen.stats is None


def test_all_screen_update():
    screen = AllScreen()
    stats = make_stats()
    screen.update(stats)
    assert screen.stats is stats


def test_render_loading():
    assert AllScreen().render() == ["jetmon", "Loading..."]


def test_render_content():
    screen = AllScreen()
    screen.update(make_stats())
    lines = screen.render()
    assert lines[0] == "jetmon | v0.1.0"
    assert lines[1:5] == ["CPU Usage", "50%", "GPU Usage", "60%"]
    assert lines[5] == "Memory: 4.0KB / 8.0KB"
    assert lines[6] == "50%"
    assert lines[8] == "CPU: 45.0°C | GPU: 50.0°C | Board: 0.0°C"
    assert lines[10] == "Total: 10.50W"
    assert lines[-1] == "q: quit | 1-8: screens | h: help"


def test_fractional_usage_label():
    screen = AllScreen()
    screen.update(make_stats(cpu_usage=12.5))
    assert screen.render()[2] == "12.5%"


def test_zero_ram_total_gives_zero_percent():
    screen = AllScreen()
    screen.update(make_stats(ram_used=100, ram_total=0))
    assert screen.render()[6] == "0%"


@pytest.mark.parametrize(
    "used,total,expected",
    [
        (512, 1024, "Memory: 512.0B / 1.0KB"),
        (2 * 1024**3, 4 * 1024**3, "Memory: 2.0GB / 4.0GB"),
    ],
)
def test_memory_title_units(used, total, expected):
    screen = AllScreen()
    screen.update(make_stats(ram_used=used, ram_total=total))
    assert screen.render()[5] == expected


def test_to_dict_nested():
    data = make_stats().to_dict()
    assert data["cpu"] == {"usage": 50.0, "frequency": 2000}
    assert data["memory"]["ram_total"] == 8192
    assert data["board"] == {"model": "Jetson Orin", "jetpack": "6.0", "l4t": "36.3"}
    assert data["power"] == {"total": 10.5}
    assert data["fan"] == {"speed": 50}
    assert data["temperature"] == {"cpu": 45.0, "gpu": 50.0}