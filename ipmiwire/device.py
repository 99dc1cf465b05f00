"""Get Device ID and Get System GUID commands."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .codes import TruncatedError


def _bcd(value: int) -> int:
    return (value >> 4) * 10 + (value & 0xF)


def _bit(value: int, n: int) -> bool:
    return value & (1 << n) != 0


@dataclass
class GetDeviceIDRsp:
    """The response to a Get Device ID command.

    ``manufacturer`` is an IANA enterprise number; ``auxiliary_firmware_revision``
    is always 4 bytes, zero-filled if the BMC omitted it.
    """

    id: int = 0
    provides_sdrs: bool = False
    revision: int = 0
    available: bool = False
    major_firmware_revision: int = 0
    minor_firmware_revision: int = 0
    major_ipmi_version: int = 0
    minor_ipmi_version: int = 0
    supports_chassis_device: bool = False
    supports_bridge_device: bool = False
    supports_ipmb_event_generator_device: bool = False
    supports_ipmb_event_receiver_device: bool = False
    supports_fru_inventory_device: bool = False
    supports_sel_device: bool = False
    supports_sdr_repository_device: bool = False
    supports_sensor_device: bool = False
    manufacturer: int = 0
    product: int = 0
    auxiliary_firmware_revision: bytes = bytes(4)
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetDeviceIDRsp:
        data = bytes(data)
        if len(data) < 11:
            raise TruncatedError(
                "Get Device ID response must be at least 11 bytes excluding "
                f"completion code; got {len(data)}"
            )
        support = data[5]
        return cls(
            id=data[0],
            provides_sdrs=_bit(data[1], 7),
            revision=data[1] & 0x0F,
            available=not _bit(data[2], 7),
            major_firmware_revision=data[2] & 0x7F,
            minor_firmware_revision=_bcd(data[3]),
            major_ipmi_version=data[4] & 0xF,
            minor_ipmi_version=data[4] >> 4,
            supports_chassis_device=_bit(support, 7),
            supports_bridge_device=_bit(support, 6),
            supports_ipmb_event_generator_device=_bit(support, 5),
            supports_ipmb_event_receiver_device=_bit(support, 4),
            supports_fru_inventory_device=_bit(support, 3),
            supports_sel_device=_bit(support, 2),
            supports_sdr_repository_device=_bit(support, 1),
            supports_sensor_device=_bit(support, 0),
            manufacturer=int.from_bytes(data[6:9], "little"),
            product=int.from_bytes(data[9:11], "little"),
            auxiliary_firmware_revision=data[11:15].ljust(4, b"\x00"),
            contents=data,
        )


@dataclass
class GetSystemGUIDRsp:
    """The response to a Get System GUID command, holding the 16 raw bytes."""

    guid: bytes = bytes(16)
    contents: bytes = b""
    payload: bytes = b""

    @property
    def uuid(self) -> uuid.UUID:
        """The GUID bytes interpreted in their original order."""
        return uuid.UUID(bytes=self.guid)

    @classmethod
    def decode(cls, data: bytes) -> GetSystemGUIDRsp:
        data = bytes(data)
        if len(data) < 16:
            raise TruncatedError(f"GUID must be 16 bytes long, got {len(data)}")
        return cls(guid=data[:16], contents=data[:16])