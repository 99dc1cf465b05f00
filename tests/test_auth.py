import pytest

from ipmiwire.auth import (
    GetChannelAuthenticationCapabilitiesReq,
    GetChannelAuthenticationCapabilitiesRsp,
)
from ipmiwire.codes import Channel, TruncatedError

PRIVILEGE_USER = 2
PRIVILEGE_ADMINISTRATOR = 4


@pytest.mark.parametrize(
    "req, want",
    [
        (
            GetChannelAuthenticationCapabilitiesReq(
                extended_data=True,
                channel=Channel.PRIMARY_IPMB,
                max_privilege_level=PRIVILEGE_ADMINISTRATOR,
            ),
            bytes([0x80, 0x04]),
        ),
        (
            GetChannelAuthenticationCapabilitiesReq(
                extended_data=False,
                channel=Channel.PRESENT_INTERFACE,
                max_privilege_level=PRIVILEGE_USER,
            ),
            bytes([0x0E, 0x02]),
        ),
    ],
)
def test_req_to_bytes(req, want):
    assert req.to_bytes() == want


def test_rsp_too_short():
    with pytest.raises(TruncatedError):
        GetChannelAuthenticationCapabilitiesRsp.decode(bytes(7))


def test_rsp_decode_v1_only():
    data = bytes([0x0, 0x15, 0x15, 0x1, 0x3, 0x2, 0x1, 0x22])
    want = GetChannelAuthenticationCapabilitiesRsp(
        channel=Channel.PRIMARY_IPMB,
        extended_capabilities=False,
        authentication_type_oem=False,
        authentication_type_password=True,
        authentication_type_md5=True,
        authentication_type_md2=False,
        authentication_type_none=True,
        two_key_login=False,
        per_message_authentication=True,
        user_level_authentication=False,
        non_null_usernames_enabled=True,
        null_usernames_enabled=False,
        anonymous_login_enabled=True,
        supports_v2=False,
        supports_v1=True,
        oem=66051,
        oem_data=0x22,
        contents=data,
        payload=b"",
    )
    assert GetChannelAuthenticationCapabilitiesRsp.decode(data) == want


def test_rsp_decode_extended_with_trailing():
    data = bytes([0xE, 0xA2, 0x2A, 0x3, 0x1, 0x2, 0x3, 0xFF, 0x1])
    want = GetChannelAuthenticationCapabilitiesRsp(
        channel=Channel.PRESENT_INTERFACE,
        extended_capabilities=True,
        authentication_type_oem=True,
        authentication_type_password=False,
        authentication_type_md5=False,
        authentication_type_md2=True,
        authentication_type_none=False,
        two_key_login=True,
        per_message_authentication=False,
        user_level_authentication=True,
        non_null_usernames_enabled=False,
        null_usernames_enabled=True,
        anonymous_login_enabled=False,
        supports_v2=True,
        supports_v1=True,
        oem=197121,
        oem_data=0xFF,
        contents=data[:8],
        payload=bytes([0x1]),
    )
    assert GetChannelAuthenticationCapabilitiesRsp.decode(data) == want


def test_rsp_channel_is_channel_type():
    rsp = GetChannelAuthenticationCapabilitiesRsp.decode(
        bytes([0xE, 0, 0, 0, 0, 0, 0, 0])
    )
    assert str(rsp.channel) == "0xe(Present I/F)"