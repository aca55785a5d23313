"""Angle value types: degree-based and hour-based angles with a sign token.

Both types hold a single signed decimal value. Sexagesimal input carries its
sign separately so that "-0 30 00" is not lost and minutes/seconds never carry
a sign of their own.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeVar

from celestial_tools.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HOURS_PER_DAY,
)

_A = TypeVar('_A', bound='_Angle')


class Sign(Enum):
    """Sign token for sexagesimal construction."""

    PLUS = 1
    MINUS = -1


@dataclass(frozen=True, order=True)
class _Angle:
    """Shared arithmetic for Degree and Hour; circle is the full-turn value."""

    value: float
    circle: ClassVar[float] = DEGREES_PER_CIRCLE

    @classmethod
    def from_sexagesimal(
        cls: type[_A], sign: Sign, whole: float, minutes: float = 0.0, seconds: float = 0.0
    ) -> _A:
        """Build an angle from unsigned components and a sign token.

        Parameters:
            sign: Sign.PLUS or Sign.MINUS, applied once to the total.
            whole: Degrees (or hours), non-negative.
            minutes: Minutes, non-negative.
            seconds: Seconds, non-negative.

        Returns:
            New angle of the calling type.

        Raises:
            ValueError: If any component is negative.
        """
        if whole < 0 or minutes < 0 or seconds < 0:
            raise ValueError(
                f'Sexagesimal components must be non-negative, got {whole}, {minutes}, {seconds}; '
                'use the sign token for negative angles'
            )
        total = whole + minutes / ARCMIN_PER_DEGREE + seconds / ARCSEC_PER_DEGREE
        return cls(sign.value * total)

    @property
    def sexagesimal(self) -> tuple[Sign, int, int, float]:
        """Decompose into (sign, whole, minutes, seconds) with unsigned components."""
        sign = Sign.MINUS if self.value < 0 else Sign.PLUS
        total = abs(self.value)
        whole = int(total)
        rest = (total - whole) * ARCMIN_PER_DEGREE
        minutes = int(rest)
        seconds = (rest - minutes) * ARCMIN_PER_DEGREE
        return (sign, whole, minutes, seconds)

    def reduced(self: _A) -> _A:
        """Return the angle reduced to [0, circle)."""
        c = self.circle
        if 0.0 <= self.value < c:
            return self
        r = math.fmod(self.value, c)
        if r < 0.0:
            r += c
        if r >= c:
            r -= c
        return type(self)(r)

    def reduced_to_symmetric(self: _A) -> _A:
        """Return the angle reduced to (-circle/2, circle/2]."""
        half = self.circle / 2.0
        if -half < self.value <= half:
            return self
        r = self.reduced().value
        if r > half:
            r -= self.circle
        return type(self)(r)

    def is_close(self: _A, other: _A, accuracy: _A) -> bool:
        """Return True if the normalized difference is within accuracy.

        Parameters:
            other: Angle of the same unit.
            accuracy: Tolerance of the same unit.

        Raises:
            TypeError: If other or accuracy is a different unit.
        """
        if type(other) is not type(self) or type(accuracy) is not type(self):
            raise TypeError(
                f'Cannot compare {type(self).__name__} with {type(other).__name__} '
                f'(accuracy {type(accuracy).__name__}); convert units first'
            )
        diff = type(self)(self.value - other.value).reduced_to_symmetric()
        return abs(diff.value) <= abs(accuracy.value)

    def _coerce(self, other: object) -> float | None:
        if type(other) is type(self):
            return other.value  # type: ignore[attr-defined]
        if isinstance(other, numbers.Real) and not isinstance(other, _Angle):
            return float(other)
        return None

    def __add__(self: _A, other: object) -> _A:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self.value + v)

    __radd__ = __add__

    def __sub__(self: _A, other: object) -> _A:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(self.value - v)

    def __rsub__(self: _A, other: object) -> _A:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return type(self)(v - self.value)

    def __mul__(self: _A, factor: object) -> _A:
        if not isinstance(factor, numbers.Real) or isinstance(factor, _Angle):
            return NotImplemented
        return type(self)(self.value * float(factor))

    __rmul__ = __mul__

    def __truediv__(self: _A, divisor: object) -> _A:
        if not isinstance(divisor, numbers.Real) or isinstance(divisor, _Angle):
            return NotImplemented
        return type(self)(self.value / float(divisor))

    def __neg__(self: _A) -> _A:
        return type(self)(-self.value)

    def __abs__(self: _A) -> _A:
        return type(self)(abs(self.value))

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, order=True)
class Degree(_Angle):
    """Angle in decimal degrees."""

    circle: ClassVar[float] = DEGREES_PER_CIRCLE

    @classmethod
    def from_radians(cls, radians: float) -> Degree:
        return cls(math.degrees(radians))

    @property
    def radians(self) -> float:
        return math.radians(self.value)

    @property
    def in_hours(self) -> Hour:
        """Same angle expressed in hours (15° per hour)."""
        return Hour(self.value / DEGREES_PER_HOUR_RA)

    @property
    def arcminutes(self) -> float:
        return self.value * ARCMIN_PER_DEGREE

    @property
    def arcseconds(self) -> float:
        return self.value * ARCSEC_PER_DEGREE

    def reduced_to_pm180(self) -> Degree:
        """Return the angle reduced to (-180, 180]."""
        return self.reduced_to_symmetric()


@dataclass(frozen=True, order=True)
class Hour(_Angle):
    """Angle in decimal hours (right ascension, hour angle, sidereal time)."""

    circle: ClassVar[float] = HOURS_PER_DAY

    @classmethod
    def from_radians(cls, radians: float) -> Hour:
        return cls(math.degrees(radians) / DEGREES_PER_HOUR_RA)

    @property
    def radians(self) -> float:
        return math.radians(self.value * DEGREES_PER_HOUR_RA)

    @property
    def in_degrees(self) -> Degree:
        """Same angle expressed in degrees."""
        return Degree(self.value * DEGREES_PER_HOUR_RA)

    def reduced_to_pm12(self) -> Hour:
        """Return the angle reduced to (-12, 12]."""
        return self.reduced_to_symmetric()


def arcminutes(value: float) -> Degree:
    """Return a Degree equal to value minutes of arc."""
    return Degree(value / ARCMIN_PER_DEGREE)


def arcseconds(value: float) -> Degree:
    """Return a Degree equal to value seconds of arc."""
    return Degree(value / ARCSEC_PER_DEGREE)
