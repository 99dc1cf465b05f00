import pytest

from ipmiwire.chassis import (
    ChassisControl,
    ChassisControlReq,
    ChassisIdentifyState,
    GetChassisStatusRsp,
    PowerRestorePolicy,
)
from ipmiwire.codes import DecodeError, TruncatedError


def test_decode_too_short():
    with pytest.raises(TruncatedError):
        GetChassisStatusRsp.decode(bytes([0x20]))


def test_truncated_is_decode_error():
    with pytest.raises(DecodeError):
        GetChassisStatusRsp.decode(b"")


def test_decode_without_front_panel_buttons():
    got = GetChassisStatusRsp.decode(bytes([0x20, 0x00, 0x60]))
    assert got == GetChassisStatusRsp(
        power_restore_policy=PowerRestorePolicy.PRIOR_STATE,
        chassis_identify_state=ChassisIdentifyState.INDEFINITE,
        contents=bytes([0x20, 0x00, 0x60]),
        payload=b"",
    )


def test_decode_alternating_bits_aa():
    data = bytes([0xAA, 0xAA, 0xAA, 0xAA])
    got = GetChassisStatusRsp.decode(data)
    assert got == GetChassisStatusRsp(
        power_restore_policy=PowerRestorePolicy.PRIOR_STATE,
        power_fault=True,
        power_overload=True,
        last_power_down_fault=True,
        last_power_down_overload=True,
        chassis_identify_state=ChassisIdentifyState.UNKNOWN,
        cooling_fault=True,
        lockout=True,
        standby_button_disable_allowed=True,
        reset_button_disable_allowed=True,
        standby_button_disabled=True,
        reset_button_disabled=True,
        contents=data,
        payload=b"",
    )


def test_decode_alternating_bits_55():
    data = bytes([0x55, 0x55, 0x55, 0x55])
    got = GetChassisStatusRsp.decode(data)
    assert got == GetChassisStatusRsp(
        power_restore_policy=PowerRestorePolicy.POWER_ON,
        power_control_fault=True,
        interlock=True,
        powered_on=True,
        powered_on_by_ipmi=True,
        last_power_down_interlock=True,
        last_power_down_supply_failure=True,
        chassis_identify_state=ChassisIdentifyState.TEMPORARY,
        drive_fault=True,
        intrusion=True,
        diagnostic_interrupt_button_disable_allowed=True,
        power_off_button_disable_allowed=True,
        diagnostic_interrupt_button_disabled=True,
        power_off_button_disabled=True,
        contents=data,
        payload=b"",
    )


def test_decode_trailing_bytes_become_payload():
    got = GetChassisStatusRsp.decode(bytes([0x01, 0x00, 0x00, 0x00, 0x9A, 0x01]))
    assert got.contents == bytes([0x01, 0x00, 0x00, 0x00])
    assert got.payload == bytes([0x9A, 0x01])
    assert got.powered_on is True


@pytest.mark.parametrize(
    "control, wire",
    [
        (ChassisControl.POWER_OFF, b"\x00"),
        (ChassisControl.POWER_ON, b"\x01"),
        (ChassisControl.POWER_CYCLE, b"\x02"),
        (ChassisControl.HARD_RESET, b"\x03"),
        (ChassisControl.DIAGNOSTIC_INTERRUPT, b"\x04"),
        (ChassisControl.SOFT_POWER_OFF, b"\x05"),
    ],
)
def test_chassis_control_req_to_bytes(control, wire):
    assert ChassisControlReq(chassis_control=control).to_bytes() == wire


@pytest.mark.parametrize(
    "value, text",
    [
        (0, "0(Power off)"),
        (1, "1(Power on)"),
        (2, "2(Power cycle)"),
        (3, "3(Hard reset)"),
        (5, "5(Soft power off)"),
        (9, "9(Unknown)"),
    ],
)
def test_chassis_control_str(value, text):
    assert str(ChassisControl(value)) == text


@pytest.mark.parametrize(
    "value, description",
    [(0, "Remain off"), (1, "Return to prior state"), (2, "Power on"), (3, "Unknown")],
)
def test_power_restore_policy_description(value, description):
    assert PowerRestorePolicy(value).description() == description


@pytest.mark.parametrize(
    "state, text",
    [
        (ChassisIdentifyState.OFF, "0(Off)"),
        (ChassisIdentifyState.TEMPORARY, "1(On temporarily)"),
        (ChassisIdentifyState.INDEFINITE, "2(On indefinitely)"),
        (ChassisIdentifyState.UNKNOWN, "255(Unknown)"),
    ],
)
def test_chassis_identify_state_str(state, text):
    assert str(state) == text