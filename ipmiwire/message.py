"""The IPMI message layer: addressing, command identification and checksums."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codes import (
    LUN,
    CommandNumber,
    CompletionCode,
    DecodeError,
    NetworkFunction,
    TruncatedError,
)

_MIN_LENGTH = 7
_GROUP_FUNCTIONS = (NetworkFunction.GROUP_REQ, NetworkFunction.GROUP_RSP)
_OEM_FUNCTIONS = (NetworkFunction.OEM_REQ, NetworkFunction.OEM_RSP)


def checksum(data: bytes) -> int:
    """Return the 2's complement checksum of the data."""
    return -sum(bytes(data)) & 0xFF


@dataclass(frozen=True)
class Operation:
    """The network function and command of a message.

    ``body`` is only meaningful for the Group Extension network function, and
    ``enterprise`` (a 3-byte IANA enterprise number) only for OEM/Group.
    """

    function: NetworkFunction = NetworkFunction.CHASSIS_REQ
    command: CommandNumber = CommandNumber(0)
    body: int = 0
    enterprise: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "function", NetworkFunction(self.function))
        object.__setattr__(self, "command", CommandNumber(self.command))
        if not 0 <= self.body <= 0xFF:
            raise ValueError(f"body code must be in 0..255, got {self.body}")
        if not 0 <= self.enterprise <= 0xFFFFFF:
            raise ValueError(f"enterprise must fit in 3 bytes, got {self.enterprise}")


@dataclass
class Message:
    """An IPMI message, either a request or a response.

    For a request, ``remote_*`` describe the responder and ``local_*`` the
    requester; for a response it is the other way round. ``completion_code``
    is only sent on the wire for responses.
    """

    operation: Operation = field(default_factory=Operation)
    remote_address: int = 0
    remote_lun: LUN = LUN(0)
    checksum1: int = 0
    local_address: int = 0
    local_lun: LUN = LUN(0)
    sequence: int = 0
    completion_code: CompletionCode = CompletionCode(0)
    checksum2: int = 0
    contents: bytes = b""
    payload: bytes = b""

    @property
    def function(self) -> NetworkFunction:
        return self.operation.function

    @property
    def command(self) -> CommandNumber:
        return self.operation.command

    @classmethod
    def decode(cls, data: bytes) -> Message:
        """Decode a message, validating both checksums."""
        data = bytes(data)
        if len(data) < _MIN_LENGTH:
            raise TruncatedError(
                f"must be at least {_MIN_LENGTH} bytes, got {len(data)}"
            )

        checksum1 = data[2]
        want = checksum(data[:2])
        if checksum1 != want:
            raise DecodeError(f"invalid checksum1: got {checksum1}, want {want}")

        checksum2 = data[-1]
        want = checksum(data[3:-1])
        if checksum2 != want:
            raise DecodeError(f"invalid checksum2: got {checksum2}, want {want}")

        function = NetworkFunction(data[1] >> 2)
        if function.is_request():
            completion_code = CompletionCode(0)
            start = 6
        else:
            completion_code = CompletionCode(data[6])
            start = 7

        body, enterprise, consumed = _decode_special(function, data[start:-1])
        return cls(
            operation=Operation(
                function=function,
                command=CommandNumber(data[5]),
                body=body,
                enterprise=enterprise,
            ),
            remote_address=data[0],
            remote_lun=LUN(data[1] & 0x3),
            checksum1=checksum1,
            local_address=data[3],
            local_lun=LUN(data[4] & 0x3),
            sequence=data[4] >> 2,
            completion_code=completion_code,
            checksum2=checksum2,
            contents=data[: start + consumed],
            payload=data[start + consumed : -1],
        )

    def serialize(self, payload: bytes = b"", compute_checksums: bool = True) -> bytes:
        """Return the wire form of the message wrapping the given payload.

        If ``compute_checksums`` is false, the stored checksums are used.
        """
        function = self.operation.function
        header = bytearray(
            [
                self.remote_address & 0xFF,
                (int(function) << 2 | int(self.remote_lun)) & 0xFF,
                0,
                self.local_address & 0xFF,
                (self.sequence << 2 | int(self.local_lun)) & 0xFF,
                int(self.operation.command),
            ]
        )
        if not function.is_request():
            header.append(int(self.completion_code))
        if function in _GROUP_FUNCTIONS:
            header.append(self.operation.body)
        elif function in _OEM_FUNCTIONS:
            header += self.operation.enterprise.to_bytes(3, "little")

        header[2] = checksum(header[:2]) if compute_checksums else self.checksum1
        body = bytes(header) + bytes(payload)
        trailer = checksum(body[3:]) if compute_checksums else self.checksum2
        return body + bytes([trailer])


def _decode_special(function: NetworkFunction, data: bytes) -> tuple[int, int, int]:
    """Return the body code, enterprise number and bytes consumed."""
    if function in _GROUP_FUNCTIONS:
        if len(data) < 1:
            raise TruncatedError("data too short for body code")
        return data[0], 0, 1
    if function in _OEM_FUNCTIONS:
        if len(data) < 3:
            raise TruncatedError("data too short for OEM EN")
        return 0, int.from_bytes(data[:3], "little"), 3
    return 0, 0, 0