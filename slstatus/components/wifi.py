"""WiFi components querying the nl80211 family over generic netlink."""

from __future__ import annotations

import socket
import struct
from typing import Iterator, NamedTuple

from slstatus.util import warn

NLMSG_HDRLEN = 16
GENL_HDRLEN = 4
NLA_HDRLEN = 4

NLMSG_ERROR = 2
NLMSG_DONE = 3
NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300

NETLINK_GENERIC = 16
GENL_ID_CTRL = 0x10
CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

_FAMILY_NAME = b"nl80211\0"
_RESPONSE_SIZE = 4096
_TIMEOUT = 2.0

_NLMSGHDR = struct.Struct("=IHHII")
_GENLMSGHDR = struct.Struct("=BBH")
_NLATTR = struct.Struct("=HH")


def _align(length: int) -> int:
    return (length + 3) & ~3


class _Message(NamedTuple):
    type: int
    payload: bytes


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto a 0-100 quality percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type ``attr`` in ``data``."""
    offset = 0
    end = len(data)
    while end - offset >= NLA_HDRLEN:
        length, kind = _NLATTR.unpack_from(data, offset)
        if length < NLA_HDRLEN:
            return None
        if kind == attr:
            return bytes(data[offset + NLA_HDRLEN : offset + length])
        offset += _align(length)
    return None


def iter_messages(data: bytes) -> Iterator[_Message]:
    """Yield ``(type, payload)`` for each netlink message in a received buffer."""
    offset = 0
    end = len(data)
    while end - offset >= NLMSG_HDRLEN:
        length, kind, _flags, _seq, _pid = _NLMSGHDR.unpack_from(data, offset)
        if length < NLMSG_HDRLEN:
            return
        stop = min(offset + length, end)
        yield _Message(kind, bytes(data[offset + NLMSG_HDRLEN : stop]))
        offset = min(offset + _align(length), end)


def _request(msg_type: int, flags: int, seq: int, cmd: int, attr_type: int, value: bytes) -> bytes:
    attr = _NLATTR.pack(NLA_HDRLEN + len(value), attr_type) + value.ljust(_align(len(value)), b"\0")
    body = _GENLMSGHDR.pack(cmd, 1, 0) + attr
    return _NLMSGHDR.pack(NLMSG_HDRLEN + len(body), msg_type, flags, seq, 0) + body


class _Nl80211:
    """A lazily opened generic netlink socket with the resolved nl80211 family id."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._seq = 1
        self._family = 0

    def next_seq(self) -> int:
        seq = self._seq
        self._seq += 1
        return seq

    def _socket(self) -> socket.socket | None:
        if self._sock is None:
            family = getattr(socket, "AF_NETLINK", None)
            if family is None:
                warn("socket 'AF_NETLINK': not supported on this platform")
                return None
            try:
                sock = socket.socket(family, socket.SOCK_RAW, NETLINK_GENERIC)
            except OSError as exc:
                warn(f"socket 'AF_NETLINK': {exc.strerror or exc}")
                return None
            sock.settimeout(_TIMEOUT)
            self._sock = sock
        return self._sock

    def send(self, data: bytes) -> bool:
        sock = self._socket()
        if sock is None:
            return False
        try:
            sent = sock.send(data)
        except OSError as exc:
            warn(f"send 'AF_NETLINK': {exc.strerror or exc}")
            return False
        if sent != len(data):
            warn("send 'AF_NETLINK': short write")
            return False
        return True

    def recv(self) -> bytes | None:
        sock = self._socket()
        if sock is None:
            return None
        try:
            return sock.recv(_RESPONSE_SIZE)
        except OSError as exc:
            warn(f"recv 'AF_NETLINK': {exc.strerror or exc}")
            return None

    def family(self) -> int:
        if self._family:
            return self._family
        request = _request(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            self.next_seq(),
            CTRL_CMD_GETFAMILY,
            CTRL_ATTR_FAMILY_NAME,
            _FAMILY_NAME,
        )
        if not self.send(request):
            return 0
        response = self.recv()
        if response is None or len(response) <= NLMSG_HDRLEN + GENL_HDRLEN:
            return 0
        value = find_attr(CTRL_ATTR_FAMILY_ID, response[NLMSG_HDRLEN + GENL_HDRLEN :])
        if value is not None and len(value) == 2:
            (self._family,) = struct.unpack("=H", value)
        return self._family


_nl80211 = _Nl80211()


def _ifindex(interface: str) -> int | None:
    try:
        return socket.if_nametoindex(interface)
    except (OSError, ValueError) as exc:
        warn(f"ioctl 'SIOCGIFINDEX': {exc}")
        return None


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the wireless ``interface`` is connected to."""
    family = _nl80211.family()
    index = _ifindex(interface)
    if not family:
        warn("nl80211 family not found")
        return None
    if index is None:
        warn(f"interface {interface} not found")
        return None

    request = _request(
        family,
        NLM_F_REQUEST,
        _nl80211.next_seq(),
        NL80211_CMD_GET_INTERFACE,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _nl80211.send(request):
        return None
    response = _nl80211.recv()
    if response is None or len(response) <= NLMSG_HDRLEN + GENL_HDRLEN:
        return None

    ssid = find_attr(NL80211_ATTR_SSID, response[NLMSG_HDRLEN + GENL_HDRLEN :])
    if ssid is None:
        return None
    return ssid.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _signal_quality(payload: bytes) -> str | None:
    if len(payload) <= GENL_HDRLEN:
        return None
    station = find_attr(NL80211_ATTR_STA_INFO, payload[GENL_HDRLEN:])
    if station is None:
        return None
    signal = find_attr(NL80211_STA_INFO_SIGNAL_AVG, station)
    if signal is None or len(signal) != 1:
        return None
    (rssi,) = struct.unpack("b", signal)
    return str(rssi_to_perc(rssi))


def wifi_perc(interface: str) -> str | None:
    """Return the averaged signal quality of the wireless ``interface`` in percent."""
    index = _ifindex(interface)
    if index is None:
        warn(f"interface {interface} not found")
        return None
    family = _nl80211.family()
    if not family:
        warn("nl80211 family not found")
        return None

    request = _request(
        family,
        NLM_F_REQUEST | NLM_F_DUMP,
        _nl80211.next_seq(),
        NL80211_CMD_GET_STATION,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _nl80211.send(request):
        return None

    strength: str | None = None
    while True:
        response = _nl80211.recv()
        if response is None or len(response) < NLMSG_HDRLEN:
            return None
        for message in iter_messages(response):
            if strength is None:
                strength = _signal_quality(message.payload)
            if message.type in (NLMSG_DONE, NLMSG_ERROR):
                return strength