import pytest

from slstatus.components import disk, text
from slstatus.registry import Arg, default_args, get_component

NAMES = [
    "battery_perc", "battery_remaining", "battery_state", "cat", "cpu_freq",
    "cpu_perc", "datetime", "disk_free", "disk_perc", "disk_total", "disk_used",
    "entropy", "gid", "hostname", "ipv4", "ipv6", "kernel_release", "load_avg",
    "netspeed_rx", "netspeed_tx", "num_files", "ram_free", "ram_perc",
    "ram_total", "ram_used", "run_command", "swap_free", "swap_perc",
    "swap_total", "swap_used", "temp", "uid", "up", "uptime", "username",
    "vol_perc", "wifi_essid", "wifi_perc",
]


@pytest.mark.parametrize("name", NAMES)
def test_component_names_match_functions(name):
    assert get_component(name).__name__ == name


def test_get_component_returns_the_module_function():
    assert get_component("cat") is text.cat
    assert get_component("disk_free") is disk.disk_free


def test_unknown_component_raises():
    with pytest.raises(KeyError):
        get_component("no_such_component")


def test_default_args_first_entry():
    first = default_args()[0]
    assert first.func is disk.disk_free
    assert first.fmt == "^C2^ [DISK %s]"
    assert first.args == "/home"


def test_default_args_formats_take_one_value():
    for arg in default_args():
        rendered = arg.fmt % "VALUE"
        assert "VALUE" in rendered


def test_default_args_use_registered_components():
    registered = {get_component(name) for name in NAMES}
    assert all(arg.func in registered for arg in default_args())


def test_arg_defaults_to_no_argument():
    arg = Arg(text.cat, "%s")
    assert arg.args is None