"""Algorithm preference payloads carried in an RMCP+ Open Session Request."""

from __future__ import annotations

from dataclasses import dataclass

from .codes import (
    ConfidentialityAlgorithm,
    DecodeError,
    IntegrityAlgorithm,
    TruncatedError,
)

_PAYLOAD_LENGTH = 8
_INTEGRITY_TYPE = 0x01
_CONFIDENTIALITY_TYPE = 0x02


def _serialise(payload_type: int, wildcard: bool, algorithm: int) -> bytes:
    # a wildcard is indicated by a zero length and a null algorithm
    if wildcard:
        length, value = 0x00, 0x00
    else:
        length, value = 0x08, int(algorithm)
    return bytes([payload_type, 0x00, 0x00, length, value, 0x00, 0x00, 0x00])


def _deserialise(data: bytes, payload_type: int, name: str) -> tuple[bool, int, bytes]:
    data = bytes(data)
    if len(data) < _PAYLOAD_LENGTH:
        raise TruncatedError(
            f"{name} payloads are {_PAYLOAD_LENGTH} bytes, only {len(data)} remaining"
        )
    if data[0] != payload_type:
        raise DecodeError(f"data does not represent an {name} payload")
    wildcard = data[3] == 0x00
    algorithm = data[4] & 0x3F
    if wildcard and algorithm != 0:
        raise DecodeError(
            f"if {name} algorithm is wildcard, concrete algorithm must be None"
        )
    return wildcard, algorithm, data[_PAYLOAD_LENGTH:]


@dataclass(frozen=True)
class ConfidentialityPayload:
    """A single confidentiality algorithm preference.

    If ``wildcard`` is true, the BMC chooses the algorithm and ``algorithm``
    is None.
    """

    wildcard: bool = False
    algorithm: ConfidentialityAlgorithm = ConfidentialityAlgorithm.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", ConfidentialityAlgorithm(self.algorithm))

    def serialise(self) -> bytes:
        """Return the 8-byte wire form of the payload."""
        return _serialise(_CONFIDENTIALITY_TYPE, self.wildcard, self.algorithm)

    @classmethod
    def deserialise(cls, data: bytes) -> tuple[ConfidentialityPayload, bytes]:
        """Decode a payload, returning it with the unconsumed bytes."""
        wildcard, algorithm, rest = _deserialise(
            data, _CONFIDENTIALITY_TYPE, "confidentiality"
        )
        return cls(wildcard=wildcard, algorithm=ConfidentialityAlgorithm(algorithm)), rest


@dataclass(frozen=True)
class IntegrityPayload:
    """A single integrity algorithm preference.

    If ``wildcard`` is true, the BMC chooses the algorithm and ``algorithm``
    is None.
    """

    wildcard: bool = False
    algorithm: IntegrityAlgorithm = IntegrityAlgorithm.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", IntegrityAlgorithm(self.algorithm))

    def serialise(self) -> bytes:
        """Return the 8-byte wire form of the payload."""
        return _serialise(_INTEGRITY_TYPE, self.wildcard, self.algorithm)

    @classmethod
    def deserialise(cls, data: bytes) -> tuple[IntegrityPayload, bytes]:
        """Decode a payload, returning it with the unconsumed bytes."""
        wildcard, algorithm, rest = _deserialise(data, _INTEGRITY_TYPE, "integrity")
        return cls(wildcard=wildcard, algorithm=IntegrityAlgorithm(algorithm)), rest