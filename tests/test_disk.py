import os
import re
from types import SimpleNamespace

import pytest

from slstatus.components.disk import disk_free, disk_perc, disk_total, disk_used

HUMAN = re.compile(r"\d+\.\d (|Ki|Mi|Gi|Ti|Pi|Ei|Zi|Yi)")


@pytest.fixture
def fake_fs(monkeypatch):
    fs = SimpleNamespace(f_frsize=1024, f_blocks=1024 * 1024, f_bfree=512 * 1024, f_bavail=256 * 1024)
    monkeypatch.setattr(os, "statvfs", lambda path: fs)
    return fs


def test_real_filesystem_shapes(tmp_path):
    for func in (disk_free, disk_total, disk_used):
        assert HUMAN.fullmatch(func(str(tmp_path)))
    assert 0 <= int(disk_perc(str(tmp_path))) <= 100


@pytest.mark.parametrize("func", [disk_free, disk_perc, disk_total, disk_used])
def test_missing_path(func, tmp_path):
    assert func(str(tmp_path / "missing")) is None


def test_disk_total(fake_fs):
    assert disk_total("/") == "1.0 Gi"


def test_disk_perc(fake_fs):
    assert disk_perc("/") == "75"


def test_disk_used_and_free_match(fake_fs):
    # 512 Ki blocks used, 256 Ki blocks available
    assert disk_used("/") == "512.0 Mi"
    assert disk_free("/").endswith(" Mi")
    assert float(disk_free("/").split()[0]) * 2 == float(disk_used("/").split()[0])


def test_disk_perc_empty_filesystem(monkeypatch):
    fs = SimpleNamespace(f_frsize=4096, f_blocks=0, f_bfree=0, f_bavail=0)
    monkeypatch.setattr(os, "statvfs", lambda path: fs)
    assert disk_perc("/") is None