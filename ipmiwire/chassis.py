"""Chassis Control and Get Chassis Status commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .codes import TruncatedError, _Byte

_CHASSIS_CONTROL_DESCRIPTIONS = {
    0: "Power off",
    1: "Power on",
    2: "Power cycle",
    3: "Hard reset",
    4: "Diagnostic interrrupt",
    5: "Soft power off",
}


class ChassisControl(_Byte):
    """A command for the chassis, e.g. power up or hard reset (4 bits on the wire)."""

    POWER_OFF: ClassVar[ChassisControl]
    POWER_ON: ClassVar[ChassisControl]
    POWER_CYCLE: ClassVar[ChassisControl]
    HARD_RESET: ClassVar[ChassisControl]
    DIAGNOSTIC_INTERRUPT: ClassVar[ChassisControl]
    SOFT_POWER_OFF: ClassVar[ChassisControl]

    def description(self) -> str:
        """Return a human-readable name for the command."""
        return _CHASSIS_CONTROL_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self)}({self.description()})"


for _code, _attr in enumerate(
    [
        "POWER_OFF",
        "POWER_ON",
        "POWER_CYCLE",
        "HARD_RESET",
        "DIAGNOSTIC_INTERRUPT",
        "SOFT_POWER_OFF",
    ]
):
    setattr(ChassisControl, _attr, ChassisControl(_code))
del _code, _attr


@dataclass
class ChassisControlReq:
    """A Chassis Control request."""

    chassis_control: ChassisControl = ChassisControl.POWER_OFF

    def to_bytes(self) -> bytes:
        return bytes([int(self.chassis_control) & 0xFF])


_POWER_RESTORE_DESCRIPTIONS = {
    0: "Remain off",
    1: "Return to prior state",
    2: "Power on",
}


class PowerRestorePolicy(_Byte):
    """What the chassis does when mains power returns (2 bits on the wire)."""

    REMAIN_OFF: ClassVar[PowerRestorePolicy]
    PRIOR_STATE: ClassVar[PowerRestorePolicy]
    POWER_ON: ClassVar[PowerRestorePolicy]
    UNKNOWN: ClassVar[PowerRestorePolicy]

    def description(self) -> str:
        """Return a human-readable name for the policy."""
        return _POWER_RESTORE_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self)}({self.description()})"


PowerRestorePolicy.REMAIN_OFF = PowerRestorePolicy(0)
PowerRestorePolicy.PRIOR_STATE = PowerRestorePolicy(1)
PowerRestorePolicy.POWER_ON = PowerRestorePolicy(2)
PowerRestorePolicy.UNKNOWN = PowerRestorePolicy(3)


_IDENTIFY_DESCRIPTIONS = {
    0: "Off",
    1: "On temporarily",
    2: "On indefinitely",
}


class ChassisIdentifyState(_Byte):
    """The state of the chassis identification mechanism, usually a light."""

    OFF: ClassVar[ChassisIdentifyState]
    TEMPORARY: ClassVar[ChassisIdentifyState]
    INDEFINITE: ClassVar[ChassisIdentifyState]
    UNKNOWN: ClassVar[ChassisIdentifyState]

    def description(self) -> str:
        """Return a human-readable name for the state."""
        return _IDENTIFY_DESCRIPTIONS.get(int(self), "Unknown")

    def __str__(self) -> str:
        return f"{int(self)}({self.description()})"


ChassisIdentifyState.OFF = ChassisIdentifyState(0)
ChassisIdentifyState.TEMPORARY = ChassisIdentifyState(1)
ChassisIdentifyState.INDEFINITE = ChassisIdentifyState(2)
ChassisIdentifyState.UNKNOWN = ChassisIdentifyState(0xFF)


def _bit(value: int, n: int) -> bool:
    return value & (1 << n) != 0


@dataclass
class GetChassisStatusRsp:
    """The response to a Get Chassis Status command.

    The front panel button fields are all false if the BMC omitted them.
    """

    power_restore_policy: PowerRestorePolicy = PowerRestorePolicy.REMAIN_OFF
    power_control_fault: bool = False
    power_fault: bool = False
    interlock: bool = False
    power_overload: bool = False
    powered_on: bool = False
    powered_on_by_ipmi: bool = False
    last_power_down_fault: bool = False
    last_power_down_interlock: bool = False
    last_power_down_overload: bool = False
    last_power_down_supply_failure: bool = False
    chassis_identify_state: ChassisIdentifyState = ChassisIdentifyState.OFF
    cooling_fault: bool = False
    drive_fault: bool = False
    lockout: bool = False
    intrusion: bool = False
    standby_button_disable_allowed: bool = False
    diagnostic_interrupt_button_disable_allowed: bool = False
    reset_button_disable_allowed: bool = False
    power_off_button_disable_allowed: bool = False
    standby_button_disabled: bool = False
    diagnostic_interrupt_button_disabled: bool = False
    reset_button_disabled: bool = False
    power_off_button_disabled: bool = False
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetChassisStatusRsp:
        data = bytes(data)
        if len(data) < 3:
            raise TruncatedError(f"response must be 3 or 4 bytes, got {len(data)}")

        state, last, misc = data[0], data[1], data[2]
        if _bit(misc, 6):
            identify = ChassisIdentifyState((misc & 0x30) >> 4)
        else:
            identify = ChassisIdentifyState.UNKNOWN

        fields = dict(
            power_restore_policy=PowerRestorePolicy((state & 0x60) >> 5),
            power_control_fault=_bit(state, 4),
            power_fault=_bit(state, 3),
            interlock=_bit(state, 2),
            power_overload=_bit(state, 1),
            powered_on=_bit(state, 0),
            powered_on_by_ipmi=_bit(last, 4),
            last_power_down_fault=_bit(last, 3),
            last_power_down_interlock=_bit(last, 2),
            last_power_down_overload=_bit(last, 1),
            last_power_down_supply_failure=_bit(last, 0),
            chassis_identify_state=identify,
            cooling_fault=_bit(misc, 3),
            drive_fault=_bit(misc, 2),
            lockout=_bit(misc, 1),
            intrusion=_bit(misc, 0),
        )

        if len(data) > 3:
            buttons = data[3]
            return cls(
                **fields,
                standby_button_disable_allowed=_bit(buttons, 7),
                diagnostic_interrupt_button_disable_allowed=_bit(buttons, 6),
                reset_button_disable_allowed=_bit(buttons, 5),
                power_off_button_disable_allowed=_bit(buttons, 4),
                standby_button_disabled=_bit(buttons, 3),
                diagnostic_interrupt_button_disabled=_bit(buttons, 2),
                reset_button_disabled=_bit(buttons, 1),
                power_off_button_disabled=_bit(buttons, 0),
                contents=data[:4],
                payload=data[4:],
            )
        return cls(**fields, contents=data[:3], payload=data[3:])