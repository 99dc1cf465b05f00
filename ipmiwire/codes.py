"""Small numeric identifiers used throughout IPMI messages.

Each type is an ``int`` subclass holding an unsigned byte, with named
constants attached to the class and a human-readable ``str()``.
"""

from __future__ import annotations

from typing import ClassVar


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded into a layer."""


class TruncatedError(DecodeError):
    """Raised when data ends before a layer is complete."""


class _Byte(int):
    """An unsigned 8-bit integer."""

    def __new__(cls, value: int = 0):
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{cls.__name__} must be in 0..255, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self):#x})"


class Channel(_Byte):
    """A channel number, identifying an interface on the BMC (4 bits on the wire)."""

    PRIMARY_IPMB: ClassVar[Channel]
    PRESENT_INTERFACE: ClassVar[Channel]
    SYSTEM_INTERFACE: ClassVar[Channel]

    def valid(self) -> bool:
        """Return whether the channel number is in the range 0 through 0xf."""
        return self <= 0xF

    def _name(self) -> str:
        if self == 0x0:
            return "Primary IPMB"
        if 0x1 <= self <= 0xB:
            return "Implementation-specific"
        if self == 0xE:
            return "Present I/F"
        if self == 0xF:
            return "System Interface"
        return "Unknown"

    def __str__(self) -> str:
        return f"{int(self):#x}({self._name()})"


Channel.PRIMARY_IPMB = Channel(0x0)
Channel.PRESENT_INTERFACE = Channel(0xE)
Channel.SYSTEM_INTERFACE = Channel(0xF)


class CommandNumber(_Byte):
    """A command identifier, unique only within a network function."""

    def __str__(self) -> str:
        return f"{int(self):#x}"


_COMPLETION_CODE_DESCRIPTIONS = {
    0x00: "Normal",
    0x87: "Invalid Session ID",
    0xC0: "Node Busy",
    0xC1: "Unrecognised Command",
    0xC3: "Timeout",
    0xC6: "Request Truncated",
    0xD4: "Insufficient Privileges",
    0xFF: "Unspecified Error",
}


class CompletionCode(_Byte):
    """Indicates whether a command executed successfully."""

    NORMAL: ClassVar[CompletionCode]
    INVALID_SESSION_ID: ClassVar[CompletionCode]
    NODE_BUSY: ClassVar[CompletionCode]
    UNRECOGNISED_COMMAND: ClassVar[CompletionCode]
    TIMEOUT: ClassVar[CompletionCode]
    REQUEST_TRUNCATED: ClassVar[CompletionCode]
    INSUFFICIENT_PRIVILEGES: ClassVar[CompletionCode]
    UNSPECIFIED: ClassVar[CompletionCode]

    def description(self) -> str:
        return _COMPLETION_CODE_DESCRIPTIONS.get(int(self), "Unknown")

    def is_temporary(self) -> bool:
        """Return whether a retry may succeed."""
        return self in (0xC0, 0xC3)

    def __str__(self) -> str:
        return f"0x{int(self):02x}({self.description()})"


CompletionCode.NORMAL = CompletionCode(0x00)
CompletionCode.INVALID_SESSION_ID = CompletionCode(0x87)
CompletionCode.NODE_BUSY = CompletionCode(0xC0)
CompletionCode.UNRECOGNISED_COMMAND = CompletionCode(0xC1)
CompletionCode.TIMEOUT = CompletionCode(0xC3)
CompletionCode.REQUEST_TRUNCATED = CompletionCode(0xC6)
CompletionCode.INSUFFICIENT_PRIVILEGES = CompletionCode(0xD4)
CompletionCode.UNSPECIFIED = CompletionCode(0xFF)


_CONFIDENTIALITY_NAMES = {
    0: "None",
    1: "AES-CBC-128",
    2: "xRC4-128",
    3: "xRC4-40",
}


class ConfidentialityAlgorithm(_Byte):
    """Identifier of an RMCP+ encryption algorithm."""

    NONE: ClassVar[ConfidentialityAlgorithm]
    AES_CBC_128: ClassVar[ConfidentialityAlgorithm]
    XRC4_128: ClassVar[ConfidentialityAlgorithm]
    XRC4_40: ClassVar[ConfidentialityAlgorithm]

    def __str__(self) -> str:
        name = _CONFIDENTIALITY_NAMES.get(int(self))
        if name is not None:
            return name
        if 0x30 <= self <= 0x3F:
            return "OEM"
        return "Unknown"


ConfidentialityAlgorithm.NONE = ConfidentialityAlgorithm(0)
ConfidentialityAlgorithm.AES_CBC_128 = ConfidentialityAlgorithm(1)
ConfidentialityAlgorithm.XRC4_128 = ConfidentialityAlgorithm(2)
ConfidentialityAlgorithm.XRC4_40 = ConfidentialityAlgorithm(3)


_INTEGRITY_NAMES = {
    0: "None",
    1: "HMAC-SHA1-96",
    2: "HMAC-MD5-128",
    3: "MD5-128",
    4: "HMAC-SHA256-128",
}


class IntegrityAlgorithm(_Byte):
    """Identifier of an RMCP+ integrity algorithm."""

    NONE: ClassVar[IntegrityAlgorithm]
    HMAC_SHA1_96: ClassVar[IntegrityAlgorithm]
    HMAC_MD5_128: ClassVar[IntegrityAlgorithm]
    MD5_128: ClassVar[IntegrityAlgorithm]
    HMAC_SHA256_128: ClassVar[IntegrityAlgorithm]

    def __str__(self) -> str:
        name = _INTEGRITY_NAMES.get(int(self))
        if name is not None:
            return name
        if 0xC0 <= self <= 0xFF:
            return "OEM"
        return "Unknown"


IntegrityAlgorithm.NONE = IntegrityAlgorithm(0)
IntegrityAlgorithm.HMAC_SHA1_96 = IntegrityAlgorithm(1)
IntegrityAlgorithm.HMAC_MD5_128 = IntegrityAlgorithm(2)
IntegrityAlgorithm.MD5_128 = IntegrityAlgorithm(3)
IntegrityAlgorithm.HMAC_SHA256_128 = IntegrityAlgorithm(4)


_LUN_NAMES = {
    0: "0(BMC command/event request message)",
    1: "1(OEM 1)",
    2: "2(SMS command)",
    3: "3(OEM 2)",
}


class LUN(_Byte):
    """A logical unit number (2 bits on the wire)."""

    BMC: ClassVar[LUN]
    SMS: ClassVar[LUN]

    def __str__(self) -> str:
        return _LUN_NAMES.get(int(self), f"{int(self)}(Invalid)")


LUN.BMC = LUN(0x0)
LUN.SMS = LUN(0x2)


_NETFN_NAMES = {
    0x00: "Chassis",
    0x02: "Bridge",
    0x04: "Sensor/Event",
    0x06: "App",
    0x08: "Firmware",
    0x0A: "Storage",
    0x0C: "Transport",
    0x2C: "Group Extension",
    0x2E: "OEM/Group",
}


class NetworkFunction(_Byte):
    """A network function code (6 bits on the wire); even for requests."""

    CHASSIS_REQ: ClassVar[NetworkFunction]
    CHASSIS_RSP: ClassVar[NetworkFunction]
    BRIDGE_REQ: ClassVar[NetworkFunction]
    BRIDGE_RSP: ClassVar[NetworkFunction]
    SENSOR_REQ: ClassVar[NetworkFunction]
    SENSOR_RSP: ClassVar[NetworkFunction]
    APP_REQ: ClassVar[NetworkFunction]
    APP_RSP: ClassVar[NetworkFunction]
    FIRMWARE_REQ: ClassVar[NetworkFunction]
    FIRMWARE_RSP: ClassVar[NetworkFunction]
    STORAGE_REQ: ClassVar[NetworkFunction]
    STORAGE_RSP: ClassVar[NetworkFunction]
    TRANSPORT_REQ: ClassVar[NetworkFunction]
    TRANSPORT_RSP: ClassVar[NetworkFunction]
    GROUP_REQ: ClassVar[NetworkFunction]
    GROUP_RSP: ClassVar[NetworkFunction]
    OEM_REQ: ClassVar[NetworkFunction]
    OEM_RSP: ClassVar[NetworkFunction]

    def is_request(self) -> bool:
        """Return whether the code is used for request messages."""
        return self % 2 == 0

    def _name(self) -> str:
        value = int(self)
        if value <= 0x2F:
            name = _NETFN_NAMES.get(value & ~1)
            if name is not None:
                return name
        if 0x0E <= value <= 0x2B:
            return "Reserved"
        if 0x30 <= value <= 0x3F:
            return "Controller-specific OEM/Group"
        return "Unknown"

    def __str__(self) -> str:
        variety = "Request" if self.is_request() else "Response"
        return f"{int(self):#x}({self._name()} {variety})"


for _code, _attr in [
    (0x00, "CHASSIS"),
    (0x02, "BRIDGE"),
    (0x04, "SENSOR"),
    (0x06, "APP"),
    (0x08, "FIRMWARE"),
    (0x0A, "STORAGE"),
    (0x0C, "TRANSPORT"),
    (0x2C, "GROUP"),
    (0x2E, "OEM"),
]:
    setattr(NetworkFunction, f"{_attr}_REQ", NetworkFunction(_code))
    setattr(NetworkFunction, f"{_attr}_RSP", NetworkFunction(_code + 1))
del _code, _attr


_ENTITY_ID_DESCRIPTIONS = {
    0x00: "Unspecified",
    0x01: "Other",
    0x03: "Processor",
    0x04: "Disk (Bay)",
    0x05: "Peripheral Bay",
    0x06: "System Management Module",
    0x07: "System Board",
    0x08: "Memory Module",
    0x09: "Processor Module",
    0x0A: "Power Supply",
    0x0B: "Add-in Card",
    0x0C: "Front Panel Board",
    0x0D: "Back Panel Board",
    0x0E: "Power System Board",
    0x0F: "Drive Backplane",
    0x17: "System Chassis",
    0x1D: "Cooling Device",
    0x20: "Memory Device",
    0x37: "Air Inlet",
    0x40: "Air Inlet (DCMI)",
    0x41: "Processor (DCMI)",
    0x42: "System Board (DCMI)",
}


class EntityID(_Byte):
    """The kind of hardware a sensor or device is associated with."""

    UNSPECIFIED: ClassVar[EntityID]
    OTHER: ClassVar[EntityID]
    PROCESSOR: ClassVar[EntityID]
    DISK: ClassVar[EntityID]
    PERIPHERAL_BAY: ClassVar[EntityID]
    SYSTEM_MANAGEMENT_MODULE: ClassVar[EntityID]
    SYSTEM_BOARD: ClassVar[EntityID]
    MEMORY_MODULE: ClassVar[EntityID]
    PROCESSOR_MODULE: ClassVar[EntityID]
    POWER_SUPPLY: ClassVar[EntityID]
    ADD_IN_CARD: ClassVar[EntityID]
    FRONT_PANEL_BOARD: ClassVar[EntityID]
    BACK_PANEL_BOARD: ClassVar[EntityID]
    POWER_SYSTEM_BOARD: ClassVar[EntityID]
    DRIVE_BACKPLANE: ClassVar[EntityID]
    SYSTEM_CHASSIS: ClassVar[EntityID]
    COOLING_DEVICE: ClassVar[EntityID]
    MEMORY_DEVICE: ClassVar[EntityID]
    AIR_INLET: ClassVar[EntityID]
    DCMI_AIR_INLET: ClassVar[EntityID]
    DCMI_PROCESSOR: ClassVar[EntityID]
    DCMI_SYSTEM_BOARD: ClassVar[EntityID]

    def description(self) -> str:
        return _ENTITY_ID_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


for _code, _attr in [
    (0x00, "UNSPECIFIED"),
    (0x01, "OTHER"),
    (0x03, "PROCESSOR"),
    (0x04, "DISK"),
    (0x05, "PERIPHERAL_BAY"),
    (0x06, "SYSTEM_MANAGEMENT_MODULE"),
    (0x07, "SYSTEM_BOARD"),
    (0x08, "MEMORY_MODULE"),
    (0x09, "PROCESSOR_MODULE"),
    (0x0A, "POWER_SUPPLY"),
    (0x0B, "ADD_IN_CARD"),
    (0x0C, "FRONT_PANEL_BOARD"),
    (0x0D, "BACK_PANEL_BOARD"),
    (0x0E, "POWER_SYSTEM_BOARD"),
    (0x0F, "DRIVE_BACKPLANE"),
    (0x17, "SYSTEM_CHASSIS"),
    (0x1D, "COOLING_DEVICE"),
    (0x20, "MEMORY_DEVICE"),
    (0x37, "AIR_INLET"),
    (0x40, "DCMI_AIR_INLET"),
    (0x41, "DCMI_PROCESSOR"),
    (0x42, "DCMI_SYSTEM_BOARD"),
]:
    setattr(EntityID, _attr, EntityID(_code))
del _code, _attr


class EntityInstance(_Byte):
    """Distinguishes multiple occurrences of an entity (7 bits on the wire)."""

    def is_system_relative(self) -> bool:
        """Return whether the instance is unique for its entity system-wide."""
        return self <= 0x5F

    def is_device_relative(self) -> bool:
        """Return whether the instance is unique only on its owning controller."""
        return 0x60 <= self <= 0x7F

    def __str__(self) -> str:
        if self.is_system_relative():
            return f"{int(self)}(System-relative)"
        return f"{int(self) - 0x60}(Device-relative)"