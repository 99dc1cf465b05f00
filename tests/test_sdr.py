from datetime import datetime, timezone

import pytest

from ipmiwire.codes import DecodeError, TruncatedError
from ipmiwire.sdr import (
    GetSDRRepositoryInfoRsp,
    GetSDRReq,
    GetSDRRsp,
    GetSensorReadingReq,
    GetSensorReadingRsp,
)


@pytest.mark.parametrize(
    "req, want",
    [
        (
            GetSDRReq(reservation_id=12345, record_id=54321, offset=0, length=22),
            bytes([0x39, 0x30, 0x31, 0xD4, 0x00, 0x16]),
        ),
        (
            GetSDRReq(reservation_id=54321, record_id=12345, offset=22, length=255),
            bytes([0x31, 0xD4, 0x39, 0x30, 0x16, 0xFF]),
        ),
    ],
)
def test_get_sdr_req_to_bytes(req, want):
    assert req.to_bytes() == want


def test_get_sdr_rsp_too_short():
    with pytest.raises(TruncatedError):
        GetSDRRsp.decode(bytes(1))


@pytest.mark.parametrize(
    "data, want",
    [
        (
            bytes([0x0F, 0xF0]),
            GetSDRRsp(next=61455, contents=bytes([0x0F, 0xF0]), payload=b""),
        ),
        (
            bytes([0xF0, 0x0F, 0x01, 0x02, 0x03]),
            GetSDRRsp(
                next=4080, contents=bytes([0xF0, 0x0F]), payload=bytes([1, 2, 3])
            ),
        ),
    ],
)
def test_get_sdr_rsp_decode(data, want):
    assert GetSDRRsp.decode(data) == want


def test_get_sdr_repository_info_too_short():
    with pytest.raises(DecodeError):
        GetSDRRepositoryInfoRsp.decode(bytes(13))


def test_get_sdr_repository_info_decode_first():
    data = bytes(
        [0x02, 0xAB, 0xBA, 0xCD, 0xDC, 0x04, 0x03, 0x02, 0x01, 0x01, 0x02, 0x03, 0x04, 0x55]
    )
    want = GetSDRRepositoryInfoRsp(
        version=20,
        records=47787,
        free_space=56525,
        last_addition=datetime.fromtimestamp(16909060, timezone.utc),
        last_erase=datetime.fromtimestamp(67305985, timezone.utc),
        overflow=False,
        supports_modal_update=True,
        supports_non_modal_update=False,
        supports_delete=False,
        supports_partial_add=True,
        supports_reserve=False,
        supports_get_allocation_information=True,
        contents=data,
        payload=b"",
    )
    assert GetSDRRepositoryInfoRsp.decode(data) == want


def test_get_sdr_repository_info_decode_trailing():
    body = bytes(
        [0x51, 0x0F, 0xF0, 0xF0, 0x0F, 0x01, 0x02, 0x03, 0x04, 0x04, 0x03, 0x02, 0x01, 0xAA]
    )
    want = GetSDRRepositoryInfoRsp(
        version=15,
        records=61455,
        free_space=4080,
        last_addition=datetime.fromtimestamp(67305985, timezone.utc),
        last_erase=datetime.fromtimestamp(16909060, timezone.utc),
        overflow=True,
        supports_modal_update=False,
        supports_non_modal_update=True,
        supports_delete=True,
        supports_partial_add=False,
        supports_reserve=True,
        supports_get_allocation_information=False,
        contents=body,
        payload=bytes([0xFF]),
    )
    assert GetSDRRepositoryInfoRsp.decode(body + bytes([0xFF])) == want


def test_get_sdr_repository_info_last_addition_year():
    data = bytes([0x51] + [0] * 4 + [0x04, 0x03, 0x02, 0x01] + [0] * 5)
    rsp = GetSDRRepositoryInfoRsp.decode(data)
    assert rsp.last_addition.year == 1970
    assert rsp.last_erase == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "number, want", [(0, b"\x00"), (22, b"\x16"), (254, b"\xfe")]
)
def test_get_sensor_reading_req_to_bytes(number, want):
    assert GetSensorReadingReq(number=number).to_bytes() == want


def test_get_sensor_reading_rsp_too_short():
    with pytest.raises(TruncatedError):
        GetSensorReadingRsp.decode(bytes(2))


def test_get_sensor_reading_rsp_decode_threshold():
    data = bytes([0x16, 0b10100000, 0])
    assert GetSensorReadingRsp.decode(data) == GetSensorReadingRsp(
        reading=22,
        event_messages_enabled=True,
        scanning_enabled=False,
        reading_unavailable=True,
        contents=data,
        payload=b"",
    )


def test_get_sensor_reading_rsp_decode_discrete():
    data = bytes([0xFF, 0b01011111, 0, 1, 2, 3])
    assert GetSensorReadingRsp.decode(data) == GetSensorReadingRsp(
        reading=255,
        event_messages_enabled=False,
        scanning_enabled=True,
        reading_unavailable=False,
        contents=bytes([0xFF, 0b01011111, 0, 1]),
        payload=bytes([2, 3]),
    )