"""Get SDR, Get SDR Repository Info and Get Sensor Reading commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .codes import TruncatedError

_EPOCH = datetime.fromtimestamp(0, timezone.utc)

RECORD_ID_FIRST = 0x0000
RECORD_ID_LAST = 0xFFFF


def _bit(value: int, n: int) -> bool:
    return value & (1 << n) != 0


def _bcd(value: int) -> int:
    return (value >> 4) * 10 + (value & 0xF)


@dataclass
class GetSDRReq:
    """A request for (part of) a single Sensor Data Record.

    ``reservation_id`` is required when ``offset`` is non-zero. A ``length``
    of 0xff means the entire record.
    """

    reservation_id: int = 0
    record_id: int = RECORD_ID_FIRST
    offset: int = 0
    length: int = 0xFF

    def to_bytes(self) -> bytes:
        return (
            self.reservation_id.to_bytes(2, "little")
            + self.record_id.to_bytes(2, "little")
            + bytes([self.offset & 0xFF, self.length & 0xFF])
        )


@dataclass
class GetSDRRsp:
    """The response to a Get SDR request; ``payload`` holds the record data."""

    next: int = 0
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetSDRRsp:
        data = bytes(data)
        if len(data) < 2:
            raise TruncatedError(
                f"response must be at least 2 bytes for the record ID, got {len(data)}"
            )
        return cls(
            next=int.from_bytes(data[:2], "little"),
            contents=data[:2],
            payload=data[2:],
        )


@dataclass
class GetSDRRepositoryInfoRsp:
    """The response to a Get SDR Repository Info command.

    ``last_addition`` and ``last_erase`` are UTC datetimes; the Unix epoch
    means never.
    """

    version: int = 0
    records: int = 0
    free_space: int = 0
    last_addition: datetime = field(default=_EPOCH)
    last_erase: datetime = field(default=_EPOCH)
    overflow: bool = False
    supports_modal_update: bool = False
    supports_non_modal_update: bool = False
    supports_delete: bool = False
    supports_partial_add: bool = False
    supports_reserve: bool = False
    supports_get_allocation_information: bool = False
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetSDRRepositoryInfoRsp:
        data = bytes(data)
        if len(data) < 14:
            raise TruncatedError(f"response must be 14 bytes, got {len(data)}")
        flags = data[13]
        return cls(
            version=_bcd(data[0] & 0xF) * 10 + _bcd(data[0] >> 4),
            records=int.from_bytes(data[1:3], "little"),
            free_space=int.from_bytes(data[3:5], "little"),
            last_addition=datetime.fromtimestamp(
                int.from_bytes(data[5:9], "little"), timezone.utc
            ),
            last_erase=datetime.fromtimestamp(
                int.from_bytes(data[9:13], "little"), timezone.utc
            ),
            overflow=_bit(flags, 7),
            supports_modal_update=_bit(flags, 6),
            supports_non_modal_update=_bit(flags, 5),
            supports_delete=_bit(flags, 3),
            supports_partial_add=_bit(flags, 2),
            supports_reserve=_bit(flags, 1),
            supports_get_allocation_information=_bit(flags, 0),
            contents=data[:14],
            payload=data[14:],
        )


@dataclass
class GetSensorReadingReq:
    """A Get Sensor Reading request for the given sensor number."""

    number: int = 0

    def to_bytes(self) -> bytes:
        return bytes([self.number & 0xFF])


@dataclass
class GetSensorReadingRsp:
    """The response to a Get Sensor Reading request.

    ``reading`` is the raw value; ignore it if ``reading_unavailable`` is set.
    """

    reading: int = 0
    event_messages_enabled: bool = False
    scanning_enabled: bool = False
    reading_unavailable: bool = False
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetSensorReadingRsp:
        data = bytes(data)
        if len(data) < 3:
            # the sensor is likely inactive or disabled
            raise TruncatedError(f"response must be at least 3 bytes, got {len(data)}")
        # a fourth byte is only present for discrete reading sensors
        end = 4 if len(data) > 3 else 3
        return cls(
            reading=data[0],
            event_messages_enabled=_bit(data[1], 7),
            scanning_enabled=_bit(data[1], 6),
            reading_unavailable=_bit(data[1], 5),
            contents=data[:end],
            payload=data[end:],
        )