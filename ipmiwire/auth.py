"""Get Channel Authentication Capabilities command."""

from __future__ import annotations

from dataclasses import dataclass

from .codes import Channel, TruncatedError


def _bit(value: int, n: int) -> bool:
    return value & (1 << n) != 0


@dataclass
class GetChannelAuthenticationCapabilitiesReq:
    """A Get Channel Authentication Capabilities request.

    ``extended_data`` asks for IPMI v2.0 capabilities; ``max_privilege_level``
    is the privilege level the console intends to use.
    """

    extended_data: bool = False
    channel: Channel = Channel.PRESENT_INTERFACE
    max_privilege_level: int = 0

    def to_bytes(self) -> bytes:
        first = int(self.channel) & 0xFF
        if self.extended_data:
            first |= 1 << 7
        return bytes([first, int(self.max_privilege_level) & 0xFF])


@dataclass
class GetChannelAuthenticationCapabilitiesRsp:
    """The response to a Get Channel Authentication Capabilities request.

    ``oem`` is the IANA enterprise number of the OEM authentication type, or
    zero if there is none.
    """

    channel: Channel = Channel(0)
    extended_capabilities: bool = False
    authentication_type_oem: bool = False
    authentication_type_password: bool = False
    authentication_type_md5: bool = False
    authentication_type_md2: bool = False
    authentication_type_none: bool = False
    two_key_login: bool = False
    per_message_authentication: bool = False
    user_level_authentication: bool = False
    non_null_usernames_enabled: bool = False
    null_usernames_enabled: bool = False
    anonymous_login_enabled: bool = False
    supports_v2: bool = False
    supports_v1: bool = False
    oem: int = 0
    oem_data: int = 0
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> GetChannelAuthenticationCapabilitiesRsp:
        data = bytes(data)
        if len(data) < 8:
            raise TruncatedError(
                f"invalid command response, length {len(data)} less than 8"
            )
        types, login, versions = data[1], data[2], data[3]
        return cls(
            channel=Channel(data[0]),
            extended_capabilities=_bit(types, 7),
            authentication_type_oem=_bit(types, 5),
            authentication_type_password=_bit(types, 4),
            authentication_type_md5=_bit(types, 2),
            authentication_type_md2=_bit(types, 1),
            authentication_type_none=_bit(types, 0),
            two_key_login=_bit(login, 5),
            per_message_authentication=_bit(login, 4),
            user_level_authentication=_bit(login, 3),
            non_null_usernames_enabled=_bit(login, 2),
            null_usernames_enabled=_bit(login, 1),
            anonymous_login_enabled=_bit(login, 0),
            supports_v2=_bit(versions, 1),
            supports_v1=_bit(versions, 0),
            oem=int.from_bytes(data[4:7], "little"),
            oem_data=data[7],
            contents=data[:8],
            payload=data[8:],
        )