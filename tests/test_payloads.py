import pytest

from ipmiwire.codes import (
    ConfidentialityAlgorithm,
    DecodeError,
    IntegrityAlgorithm,
    TruncatedError,
)
from ipmiwire.payloads import ConfidentialityPayload, IntegrityPayload


@pytest.mark.parametrize(
    "wire, error",
    [
        (bytes([0x02, 0, 0, 0, 0, 0, 0]), TruncatedError),
        (bytes([0x01, 0, 0, 0, 0, 0, 0, 0]), DecodeError),
        (bytes([0x02, 0, 0, 0, 0x02, 0, 0, 0]), DecodeError),
    ],
)
def test_confidentiality_deserialise_errors(wire, error):
    with pytest.raises(error):
        ConfidentialityPayload.deserialise(wire)


@pytest.mark.parametrize(
    "wire, payload, remaining",
    [
        (
            bytes([0x02, 0, 0, 0, 0, 0, 0, 0, 0x1]),
            ConfidentialityPayload(wildcard=True),
            bytes([0x1]),
        ),
        (
            bytes([0x02, 0, 0, 0x08, 0x01, 0, 0, 0]),
            ConfidentialityPayload(algorithm=ConfidentialityAlgorithm.AES_CBC_128),
            b"",
        ),
    ],
)
def test_confidentiality_round_trip(wire, payload, remaining):
    assert payload.serialise() == wire[:8]
    decoded, rest = ConfidentialityPayload.deserialise(wire)
    assert decoded == payload
    assert rest == remaining


@pytest.mark.parametrize(
    "wire, error",
    [
        (bytes([0x01, 0, 0, 0, 0, 0, 0]), TruncatedError),
        (bytes([0x00, 0, 0, 0, 0, 0, 0, 0]), DecodeError),
        (bytes([0x01, 0, 0, 0, 0x02, 0, 0, 0]), DecodeError),
    ],
)
def test_integrity_deserialise_errors(wire, error):
    with pytest.raises(error):
        IntegrityPayload.deserialise(wire)


@pytest.mark.parametrize(
    "wire, payload, remaining",
    [
        (
            bytes([0x01, 0, 0, 0, 0, 0, 0, 0, 0x1]),
            IntegrityPayload(wildcard=True),
            bytes([0x1]),
        ),
        (
            bytes([0x01, 0, 0, 0x08, 0x04, 0, 0, 0]),
            IntegrityPayload(algorithm=IntegrityAlgorithm.HMAC_SHA256_128),
            b"",
        ),
    ],
)
def test_integrity_round_trip(wire, payload, remaining):
    assert payload.serialise() == wire[:8]
    decoded, rest = IntegrityPayload.deserialise(wire)
    assert decoded == payload
    assert rest == remaining


def test_wildcard_serialise_ignores_algorithm():
    payload = IntegrityPayload(wildcard=True, algorithm=IntegrityAlgorithm.MD5_128)
    assert payload.serialise() == bytes([0x01, 0, 0, 0, 0, 0, 0, 0])


def test_algorithm_masked_to_six_bits():
    decoded, rest = IntegrityPayload.deserialise(bytes([0x01, 0, 0, 0x08, 0xC2, 0, 0, 0]))
    assert decoded.algorithm == IntegrityAlgorithm.HMAC_MD5_128
    assert rest == b""


def test_truncated_is_decode_error():
    with pytest.raises(DecodeError):
        ConfidentialityPayload.deserialise(b"\x02")