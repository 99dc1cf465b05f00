# ipmiwire

`ipmiwire` builds and parses the binary formats of IPMI v1.5 and v2.0. These
are the messages a management console exchanges with a baseboard management
controller (BMC).

The package works only with bytes. You give it bytes received from a BMC and
get back typed Python objects. You give it request objects and get back the
bytes to send.

## Installation

```
pip install ipmiwire
```

It needs Python 3.10 or later and depends on no other packages.

## What is covered

- **Codes and identifiers** (`ipmiwire.codes`)
  - `Channel`, `CommandNumber`, `CompletionCode`, `LUN`, `NetworkFunction`,
    `EntityID`, `EntityInstance`, `ConfidentialityAlgorithm` and
    `IntegrityAlgorithm`.
  - Each is an `int` subclass limited to 0..255. The named values are class
    attributes such as `Channel.PRESENT_INTERFACE` or `CompletionCode.NODE_BUSY`.
  - `str()` gives a readable form such as `0xc0(Node Busy)`.
  - Helpers: `Channel.valid()`, `CompletionCode.description()`,
    `CompletionCode.is_temporary()`, `NetworkFunction.is_request()`,
    `EntityID.description()`, `EntityInstance.is_system_relative()` and
    `EntityInstance.is_device_relative()`.
- **RMCP+ algorithm payloads** (`ipmiwire.payloads`)
  - `ConfidentialityPayload` and `IntegrityPayload` hold the 8-byte algorithm
    preferences carried in an Open Session request.
  - `serialise()` gives the wire form.
  - `deserialise(data)` returns the payload together with the bytes it did not
    consume.
- **Reading conversion** (`ipmiwire.conversion`)
  - `ConversionFactors.convert_reading(raw)` applies the linear M/B/K1/K2
    formula.
  - `Linearisation` tells linear, linearised and non-linear sensors apart.
  - `Linearisation.lineariser()` returns the function that turns a converted
    value into the final reading.
- **IPMI messages** (`ipmiwire.message`)
  - `Message.decode(data)` checks both checksums and parses the header. This
    covers the completion code of a response, the body code of a Group
    Extension message and the enterprise number of an OEM message. The rest
    is left in `payload`.
  - `Message.serialize(payload, compute_checksums=True)` wraps a payload.
  - `checksum(data)` computes the 2's complement checksum.
  - `Operation` holds the network function, command, body code and enterprise
    number.
- **Commands**
  - `ipmiwire.sessions`: `CloseSessionReq`, `GetSessionInfoReq` (with the
    `SessionIndex` sentinels) and `GetSessionInfoRsp`.
  - `ipmiwire.chassis`: `ChassisControlReq`, `ChassisControl` and
    `GetChassisStatusRsp`, with `PowerRestorePolicy` and
    `ChassisIdentifyState`.
  - `ipmiwire.device`: `GetDeviceIDRsp` and `GetSystemGUIDRsp`. The latter also
    exposes the GUID as a `uuid.UUID` through its `uuid` property.
  - `ipmiwire.sdr`: `GetSDRReq`, `GetSDRRsp`, `GetSDRRepositoryInfoRsp`,
    `GetSensorReadingReq` and `GetSensorReadingRsp`, plus `RECORD_ID_FIRST` and
    `RECORD_ID_LAST`.
  - `ipmiwire.auth`: `GetChannelAuthenticationCapabilitiesReq` and
    `GetChannelAuthenticationCapabilitiesRsp`.
  - Requests have `to_bytes()`. Responses have a `decode(data)` class method
    and keep the bytes they parsed in `contents` and any trailing bytes in
    `payload`.
- **Sensor data records** (`ipmiwire.sensor_record`)
  - `FullSensorRecord.decode(data)` parses the key (`SensorRecordKey`) and body
    of a Full Sensor Record. The body includes its `ConversionFactors` and its
    identity string.

## Usage

Build a Get SDR request:

```python
from ipmiwire.sdr import GetSDRReq

request = GetSDRReq(reservation_id=12345, record_id=54321, offset=0, length=22)
request.to_bytes()  # b"\x39\x30\x31\xd4\x00\x16"
```

Decode the data of a Get Chassis Status response:

```python
from ipmiwire.chassis import GetChassisStatusRsp, PowerRestorePolicy

status = GetChassisStatusRsp.decode(bytes([0x20, 0x00, 0x60]))
status.power_restore_policy == PowerRestorePolicy.PRIOR_STATE  # True
status.powered_on                                              # False
```

Convert a raw sensor reading into its real value:

```python
from ipmiwire.conversion import ConversionFactors

factors = ConversionFactors(m=51, b=219, b_exp=0, r_exp=-3)
factors.convert_reading(231)  # 12.0
```

## Errors

- Decoders raise `ipmiwire.codes.DecodeError` when the input is malformed.
- When the input is too short, they raise its subclass
  `ipmiwire.codes.TruncatedError`.
- Asking for the lineariser of a linear or non-linear sensor raises
  `ipmiwire.conversion.NotLinearisedError`.

## What it does not do

- It opens no sockets and has no command-line tool.
- It does not wrap messages in RMCP or in v1.5 or v2.0 session headers.
- It does not establish sessions: there is no RAKP exchange, no
  authentication and no encryption.
- Several Full Sensor Record fields hold their raw wire values as plain
  integers rather than named types: sensor type, output type, analog data
  format, rate unit, units and direction.
- Identity strings are decoded only in the 6-bit packed ASCII and 8-bit Latin-1
  encodings. Other encodings raise `DecodeError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```