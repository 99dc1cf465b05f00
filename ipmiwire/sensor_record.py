"""The Full Sensor Record SDR type."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codes import LUN, Channel, DecodeError, EntityID, EntityInstance, TruncatedError
from .conversion import ConversionFactors, Linearisation

_MIN_LENGTH = 43

_ENCODING_UNICODE = 0
_ENCODING_BCD_PLUS = 1
_ENCODING_PACKED_ASCII = 2
_ENCODING_LATIN1 = 3


def _bit(value: int, n: int) -> bool:
    return value & (1 << n) != 0


def _twos(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of ``value`` as a 2's complement number."""
    value &= (1 << bits) - 1
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def _decode_packed_ascii(data: bytes, characters: int) -> tuple[str, int]:
    """Decode 6-bit packed ASCII, returning the text and bytes consumed."""
    consumed = (characters * 6 + 7) // 8
    if len(data) < consumed:
        raise TruncatedError(
            f"{characters} 6-bit characters need {consumed} bytes, got {len(data)}"
        )
    packed = int.from_bytes(data[:consumed], "little")
    text = "".join(
        chr(((packed >> (6 * i)) & 0x3F) + 0x20) for i in range(characters)
    )
    return text, consumed


def _decode_latin1(data: bytes, characters: int) -> tuple[str, int]:
    """Decode 8-bit ASCII + Latin 1, returning the text and bytes consumed."""
    if len(data) < characters:
        raise TruncatedError(
            f"{characters} 8-bit characters need {characters} bytes, got {len(data)}"
        )
    return data[:characters].decode("latin-1"), characters


_DECODERS = {
    _ENCODING_PACKED_ASCII: _decode_packed_ascii,
    _ENCODING_LATIN1: _decode_latin1,
}


@dataclass
class SensorRecordKey:
    """The record key fields shared by full and compact sensor records."""

    owner_address: int = 0
    channel: Channel = Channel(0)
    owner_lun: LUN = LUN(0)
    number: int = 0


@dataclass
class FullSensorRecord:
    """A Full Sensor Record: the record key and body of an SDR of this type.

    Enumerated fields without a dedicated type here (sensor type, output
    type, analog data format, rate unit, units and direction) hold their raw
    wire values.
    """

    key: SensorRecordKey = field(default_factory=SensorRecordKey)
    conversion_factors: ConversionFactors = field(default_factory=ConversionFactors)
    is_container_entity: bool = False
    entity: EntityID = EntityID(0)
    instance: EntityInstance = EntityInstance(0)
    ignore: bool = False
    sensor_type: int = 0
    output_type: int = 0
    analog_data_format: int = 0
    rate_unit: int = 0
    is_percentage: bool = False
    base_unit: int = 0
    modifier_unit: int = 0
    linearisation: Linearisation = Linearisation(0)
    tolerance: int = 0
    accuracy: int = 0
    accuracy_exp: int = 0
    direction: int = 0
    nominal_reading_specified: bool = False
    normal_min_specified: bool = False
    normal_max_specified: bool = False
    nominal_reading: int = 0
    normal_min: int = 0
    normal_max: int = 0
    sensor_min: int = 0
    sensor_max: int = 0
    identity: str = ""
    contents: bytes = b""
    payload: bytes = b""

    @classmethod
    def decode(cls, data: bytes) -> FullSensorRecord:
        """Decode a record key and body, starting at the owner address."""
        data = bytes(data)
        if len(data) < _MIN_LENGTH:
            raise TruncatedError(
                f"Full Sensor Records are at least {_MIN_LENGTH} bytes long, "
                f"got {len(data)}"
            )

        # offsets here are 6 less than the byte numbers in the specification
        units1 = data[15]
        accuracy_byte = data[23]

        encoding = data[42] >> 6
        decoder = _DECODERS.get(encoding)
        if decoder is None:
            raise DecodeError(f"unsupported identity string encoding {encoding}")
        characters = data[42] & 0x1F
        identity, consumed = decoder(data[_MIN_LENGTH:], characters)
        end = _MIN_LENGTH + consumed

        return cls(
            key=SensorRecordKey(
                owner_address=data[0],
                channel=Channel(data[1] >> 4),
                owner_lun=LUN(data[1] & 0x3),
                number=data[2],
            ),
            conversion_factors=ConversionFactors(
                m=_twos((data[20] >> 6) << 8 | data[19], 10),
                b=_twos((data[22] >> 6) << 8 | data[21], 10),
                b_exp=_twos(data[24] & 0xF, 4),
                r_exp=_twos(data[24] >> 4, 4),
            ),
            entity=EntityID(data[3]),
            is_container_entity=_bit(data[4], 7),
            instance=EntityInstance(data[4] & 0x7F),
            ignore=_bit(data[6], 7),
            sensor_type=data[7],
            output_type=data[8],
            analog_data_format=units1 >> 6,
            rate_unit=(units1 & 0x38) >> 3,
            is_percentage=_bit(units1, 0),
            base_unit=data[16],
            modifier_unit=data[17],
            linearisation=Linearisation(data[18] & 0x7F),
            tolerance=data[20] & 0x3F,
            accuracy=_twos((data[22] & 0x3F) | ((accuracy_byte & 0xF0) << 2), 10),
            accuracy_exp=(accuracy_byte & 0xC) >> 2,
            direction=accuracy_byte & 0x3,
            nominal_reading_specified=_bit(data[25], 0),
            normal_max_specified=_bit(data[25], 1),
            normal_min_specified=_bit(data[25], 2),
            nominal_reading=data[26],
            normal_max=data[27],
            normal_min=data[28],
            sensor_max=data[29],
            sensor_min=data[30],
            identity=identity,
            contents=data[:end],
            payload=data[end:],
        )