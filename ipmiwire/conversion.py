"""Conversion of raw sensor readings into real values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, ClassVar

from .codes import _Byte


def _pow10(n: int) -> float:
    if n >= 0:
        return 10.0**n
    return 1.0 / 10.0 ** (-n)


@dataclass
class ConversionFactors:
    """Inputs to the linear sensor reading formula.

    ``m`` and ``b`` are 10-bit signed values; ``b_exp`` (K1) and ``r_exp``
    (K2) are 4-bit signed exponents.
    """

    m: int = 0
    b: int = 0
    b_exp: int = 0
    r_exp: int = 0

    def convert_reading(self, raw: int) -> float:
        """Apply the linear formula, without linearisation, to a raw reading."""
        m_x = int(self.m) * int(raw)
        b10k1 = float(self.b) * _pow10(int(self.b_exp))
        return (float(m_x) + b10k1) * _pow10(int(self.r_exp))


class NotLinearisedError(ValueError):
    """Raised when a linearisation formula is requested for a sensor without one."""

    def __init__(self, message: str = "only linearised sensors have a linearisation formula"):
        super().__init__(message)


def _logarithm(fn: Callable[[float], float]) -> Callable[[float], float]:
    def log(x: float) -> float:
        if x > 0:
            return fn(x)
        if x == 0:
            return -math.inf
        return math.nan

    return log


def _power_of(base: float) -> Callable[[float], float]:
    def power(x: float) -> float:
        try:
            return base**x
        except OverflowError:
            return math.inf

    return power


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _inverse(x: float) -> float:
    if x == 0:
        return math.copysign(math.inf, x)
    return 1 / x


def _sqr(x: float) -> float:
    return x * x


def _cube(x: float) -> float:
    return x * (x * x)


def _sqrt(x: float) -> float:
    if x < 0:
        return math.nan
    return math.sqrt(x)


def _cube_root(x: float) -> float:
    if x < 0:
        return math.nan
    if x == 0:
        return 0.0
    return x ** (1.0 / 3)


_DESCRIPTIONS = {
    0: "Linear",
    1: "ln",
    2: "log10",
    3: "log2",
    4: "e",
    5: "exp10",
    6: "exp2",
    7: "1/x",
    8: "sqr(x)",
    9: "cube(x)",
    10: "sqrt(x)",
    11: "x^(1/3)",
    12: "Non-linear",
}

_LINEARISERS: dict[int, Callable[[float], float]] = {
    1: _logarithm(math.log),
    2: _logarithm(math.log10),
    3: _logarithm(math.log2),
    4: _exp,
    5: _power_of(10.0),
    6: _power_of(2.0),
    7: _inverse,
    8: _sqr,
    9: _cube,
    10: _sqrt,
    11: _cube_root,
}


class Linearisation(_Byte):
    """Whether a sensor is linear, linearised or non-linear."""

    LINEAR: ClassVar[Linearisation]
    LN: ClassVar[Linearisation]
    LOG10: ClassVar[Linearisation]
    LOG2: ClassVar[Linearisation]
    E: ClassVar[Linearisation]
    EXP10: ClassVar[Linearisation]
    EXP2: ClassVar[Linearisation]
    INVERSE: ClassVar[Linearisation]
    SQR: ClassVar[Linearisation]
    CUBE: ClassVar[Linearisation]
    SQRT: ClassVar[Linearisation]
    CUBE_RT: ClassVar[Linearisation]
    NON_LINEAR: ClassVar[Linearisation]

    def is_linear(self) -> bool:
        """Return whether the sensor needs only the linear formula."""
        return self == 0

    def is_linearised(self) -> bool:
        """Return whether a linearisation formula must follow conversion."""
        return 0 < self < 12

    def is_non_linear(self) -> bool:
        """Return whether readings need per-reading conversion factors."""
        return self >= 12

    def lineariser(self) -> Callable[[float], float]:
        """Return the linearisation formula for a linearised sensor."""
        try:
            return _LINEARISERS[int(self)]
        except KeyError:
            raise NotLinearisedError() from None

    def description(self) -> str:
        desc = _DESCRIPTIONS.get(int(self))
        if desc is not None:
            return desc
        if 0x71 <= self <= 0x7F:
            return "Non-linear OEM"
        return "Unknown"

    def __str__(self) -> str:
        return f"{int(self):#x}({self.description()})"


for _code, _attr in enumerate(
    [
        "LINEAR",
        "LN",
        "LOG10",
        "LOG2",
        "E",
        "EXP10",
        "EXP2",
        "INVERSE",
        "SQR",
        "CUBE",
        "SQRT",
        "CUBE_RT",
        "NON_LINEAR",
    ]
):
    setattr(Linearisation, _attr, Linearisation(_code))
del _code, _attr