from jetmon.gpu_screen import GpuScreen, GpuScreenStats, SimpleGpuStats
from jetmon.temperature_screen import SimpleTemperatureStats


def _stats():
    return GpuScreenStats(
        gpu=SimpleGpuStats(usage=60.0, frequency=1_500_000_000),
        temperature=SimpleTemperatureStats(cpu=45.0, gpu=50.0),
        gpu_name="NVIDIA GPU",
        gpu_arch="Unknown",
    )


def test_initial_state():
    assert GpuScreen().stats is None


def test_update_stores_stats():
    screen = GpuScreen()
    stats = _stats()
    screen.update(stats)
    assert screen.stats is stats


def test_render_loading():
    assert GpuScreen().render() == ["GPU", "Loading..."]


def test_render_shows_name_and_arch():
    screen = GpuScreen()
    stats = _stats()
    screen.update(stats)
    lines = screen.render()
    assert any(line.endswith(stats.gpu_name) and line.startswith("Name: ") for line in lines)
    assert any(line.endswith(stats.gpu_arch) and line.startswith("Arch: ") for line in lines)
    assert any(line.startswith("Device: ") and stats.gpu_name in line for line in lines)


def test_render_frequency_in_mhz():
    screen = GpuScreen()
    screen.update(_stats())
    assert "Freq: 1500MHz" in screen.render()


def test_render_usage_gauge_label():
    screen = GpuScreen()
    screen.update(_stats())
    assert "60%" in screen.render()


def test_render_footer_holds_gpu_temperature():
    screen = GpuScreen()
    screen.update(_stats())
    footer = screen.render()[-1]
    assert footer.startswith("q: quit | 1-8: screens | h: help")
    assert footer.endswith("GPU: 50.0°C")


def test_render_refreshes_after_update():
    screen = GpuScreen()
    screen.update(_stats())
    first = screen.render()
    changed = _stats()
    changed.gpu_name = "Orin"
    screen.update(changed)
    second = screen.render()
    assert first != second
    assert len(first) == len(second)