"""Volume component reading an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from slstatus.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line",
    "mic", "cd", "mix", "pcm2", "rec", "igain", "ogain",
    "line1", "line2", "line3", "dig1", "dig2", "dig3",
    "phin", "phout", "video", "radio", "monitor",
)

_IOC_READ = 2
_MIXER_TYPE = ord("M")
_INT_SIZE = struct.calcsize("i")


def _ior(nr: int) -> int:
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (_MIXER_TYPE << 8) | nr


SOUND_MIXER_READ_DEVMASK = _ior(0xFE)


def _mixer_read(device: int) -> int:
    return _ior(device)


def mixer_volume(value: int) -> int:
    """Return the left-channel level of a packed mixer value."""
    return value & 0xFF


def _ioctl_int(fd: int, request: int) -> int:
    buffer = bytearray(_INT_SIZE)
    fcntl.ioctl(fd, request, buffer, True)
    return struct.unpack("i", buffer)[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of the mixer at ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None

        value = None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _ioctl_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)

    if value is None:
        warn(f"mixer '{card}' has no volume control")
        return None
    return str(mixer_volume(value))