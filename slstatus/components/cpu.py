"""CPU frequency and usage components."""

from __future__ import annotations

from slstatus.util import _read_text, fmt_human, read_uint

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused=None, path: str = CPU_FREQ) -> str | None:
    """Return the frequency of the first CPU from a kHz sysfs file."""
    freq = read_uint(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


class CpuUsage:
    """CPU usage in percent since the previous call."""

    def __init__(self, path: str = PROC_STAT):
        self.path = path
        self._previous = [0.0] * _FIELDS

    def _sample(self) -> list[float] | None:
        text = _read_text(self.path)
        if text is None:
            return None
        tokens = text.split()[1 : 1 + _FIELDS]
        if len(tokens) != _FIELDS:
            return None
        try:
            return [float(token) for token in tokens]
        except ValueError:
            return None

    def __call__(self, unused=None) -> str | None:
        current = self._sample()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_perc(unused=None) -> str | None:
    """Return the system-wide CPU usage in percent since the previous call."""
    return _usage(unused)