"""Close Session and Get Session Info commands."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import ClassVar, Optional

from .codes import Channel, TruncatedError, _Byte


@dataclass
class CloseSessionReq:
    """A Close Session request.

    ``handle`` is only sent when ``id`` is zero (IPMI v2.0 only).
    """

    id: int = 0
    handle: int = 0

    def to_bytes(self) -> bytes:
        data = self.id.to_bytes(4, "little")
        if self.id == 0:
            data += bytes([self.handle & 0xFF])
        return data


class SessionIndex(_Byte):
    """The index field of a Get Session Info request, with sentinel values."""

    CURRENT: ClassVar[SessionIndex]
    HANDLE: ClassVar[SessionIndex]
    ID: ClassVar[SessionIndex]


SessionIndex.CURRENT = SessionIndex(0x00)
SessionIndex.HANDLE = SessionIndex(0xFE)
SessionIndex.ID = SessionIndex(0xFF)


@dataclass
class GetSessionInfoReq:
    """A Get Session Info request.

    The default asks about the current session. Set ``index`` to
    ``SessionIndex.HANDLE`` or ``SessionIndex.ID`` to select by handle or ID.
    """

    index: int = 0
    handle: int = 0
    id: int = 0

    def to_bytes(self) -> bytes:
        data = bytes([self.index & 0xFF])
        if self.index == SessionIndex.HANDLE:
            data += bytes([self.handle & 0xFF])
        elif self.index == SessionIndex.ID:
            data += self.id.to_bytes(4, "little")
        return data


@dataclass
class GetSessionInfoRsp:
    """The response to a Get Session Info request.

    ``user_id`` of zero means no session details were included. ``ip``,
    ``mac`` and ``port`` are only present for LAN sessions.
    """

    handle: int = 0
    max: int = 0
    active: int = 0
    user_id: int = 0
    privilege_level: int = 0
    is_ipmi_v2: bool = False
    channel: Channel = Channel(0)
    ip: Optional[IPv4Address] = None
    mac: Optional[bytes] = None
    port: int = 0
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetSessionInfoRsp:
        data = bytes(data)
        if len(data) < 3:
            raise TruncatedError(f"expected at least 3 bytes, got {len(data)}")

        handle, max_sessions, active = data[0], data[1], data[2]

        # a zero handle should mean no session, but some BMCs still send the
        # session fields after it
        if handle == 0 and len(data) == 3:
            return cls(
                handle=handle,
                max=max_sessions,
                active=active,
                contents=data[:3],
                payload=data[3:],
            )

        if len(data) < 6:
            raise TruncatedError(
                f"expected at least 6 bytes for an active session, got {len(data)}"
            )

        fields = dict(
            handle=handle,
            max=max_sessions,
            active=active,
            user_id=data[3] & 0x3F,
            privilege_level=data[4] & 0xF,
            is_ipmi_v2=(data[5] & 0xF0) >> 4 == 1,
            channel=Channel(data[5] & 0xF),
        )
        if len(data) < 18:
            return cls(**fields, contents=data[:6], payload=data[6:])

        return cls(
            **fields,
            ip=IPv4Address(data[6:10]),
            mac=data[10:16],
            port=int.from_bytes(data[16:18], "little"),
            contents=data[:18],
            payload=data[18:],
        )