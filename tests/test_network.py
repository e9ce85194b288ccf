import socket
from types import SimpleNamespace
from unittest import mock

import pytest

from slstatus.components.network import NetSpeed, ipv4, ipv6, up
from slstatus.util import fmt_human

ADDRS = {
    "eth0": [
        SimpleNamespace(family=socket.AF_INET6, address="fe80::1"),
        SimpleNamespace(family=socket.AF_INET, address="192.0.2.10"),
        SimpleNamespace(family=socket.AF_INET, address="192.0.2.11"),
    ],
    "wlan0": [SimpleNamespace(family=socket.AF_INET6, address="2001:db8::5")],
}

STATS = {
    "eth0": SimpleNamespace(isup=True),
    "wlan0": SimpleNamespace(isup=False),
}


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_ipv4_first_match(_addrs):
    assert ipv4("eth0") == "192.0.2.10"
    assert ipv4("wlan0") is None
    assert ipv4("missing0") is None


@mock.patch("psutil.net_if_addrs", return_value=ADDRS)
def test_ipv6(_addrs):
    assert ipv6("eth0") == "fe80::1"
    assert ipv6("wlan0") == "2001:db8::5"


@mock.patch("psutil.net_if_stats", return_value=STATS)
def test_up(_stats):
    assert up("eth0") == "up"
    assert up("wlan0") == "down"
    assert up("missing0") is None


def _write(root, interface, direction, value):
    stats = root / interface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


def test_netspeed_first_call_is_none(tmp_path):
    _write(tmp_path, "eth0", "rx", 5000)
    speed = NetSpeed("rx", 1000, str(tmp_path))
    assert speed("eth0") is None


def test_netspeed_rate(tmp_path):
    speed = NetSpeed("rx", 1000, str(tmp_path))
    _write(tmp_path, "eth0", "rx", 5000)
    speed("eth0")
    _write(tmp_path, "eth0", "rx", 5000 + 2048)
    assert speed("eth0") == "2.0 Ki"


def test_netspeed_tx_reads_tx_file(tmp_path):
    speed = NetSpeed("tx", 1000, str(tmp_path))
    _write(tmp_path, "eth0", "tx", 100)
    _write(tmp_path, "eth0", "rx", 1)
    speed("eth0")
    _write(tmp_path, "eth0", "tx", 100 + 4096)
    assert speed("eth0") == fmt_human(4096, 1024)


def test_netspeed_interval_scales(tmp_path):
    fast = NetSpeed("rx", 1000, str(tmp_path))
    slow = NetSpeed("rx", 2000, str(tmp_path))
    _write(tmp_path, "eth0", "rx", 10)
    fast("eth0")
    slow("eth0")
    _write(tmp_path, "eth0", "rx", 10 + 8192)
    fast_rate = fast("eth0")
    _write(tmp_path, "eth0", "rx", 10 + 16384)
    assert slow("eth0") == fast_rate


def test_netspeed_missing_interface(tmp_path):
    assert NetSpeed("rx", 1000, str(tmp_path))("missing0") is None


def test_netspeed_invalid_direction():
    with pytest.raises(ValueError):
        NetSpeed("sideways")


def test_netspeed_invalid_interval():
    with pytest.raises(ValueError):
        NetSpeed("rx", 0)