"""Planetary phenomena: conjunctions and oppositions (Meeus ch. 36).

The instant of a phenomenon is found in three steps, without iteration:

1. a periodicity estimate K from the requested year and the synodic period;
2. the mean epoch A + B*K of a fictitious planet on a circular orbit;
3. the true epoch: the mean epoch plus a fixed periodic series in the Sun's
   mean anomaly M at the mean event and, for Jupiter to Neptune, a few
   long-period arguments.

Tables are keyed by ``(BodyId, PhenomenonKind)``; a missing key means the
phenomenon is not defined for the body.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from numpy.polynomial import polynomial as P

from celestial_tools.bodies.solar_system import BodyId
from celestial_tools.constants import DAYS_PER_GREGORIAN_YEAR, DAYS_PER_JULIAN_CENTURY, JD_J2000
from celestial_tools.julian_day import JulianDay

logger = logging.getLogger(__name__)

# JD of 0000-01-00 on the proleptic Gregorian year scale used by the K estimate.
_YEAR_ZERO_JD = 1721060.0


class PhenomenonKind(Enum):
    """Planet-Sun configuration as seen from Earth."""

    INFERIOR_CONJUNCTION = 'inferior conjunction'
    SUPERIOR_CONJUNCTION = 'superior conjunction'
    OPPOSITION = 'opposition'
    CONJUNCTION = 'conjunction'


class UnsupportedPhenomenonError(ValueError):
    """The phenomenon is not defined (or not tabulated) for the body."""

    def __init__(self, body: object, kind: PhenomenonKind, message: str | None = None) -> None:
        self.body = body
        self.kind = kind
        if message is None:
            name = body.name.title() if isinstance(body, BodyId) else repr(body)
            message = f'{kind.value} is not defined for {name}'
        super().__init__(message)


class UnsupportedBodyError(UnsupportedPhenomenonError):
    """The body has no phenomena tables at all (Sun, Moon, Earth, Pluto)."""

    def __init__(self, body: object, kind: PhenomenonKind) -> None:
        name = body.name.title() if isinstance(body, BodyId) else repr(body)
        super().__init__(body, kind, f'No planetary phenomena for {name}')


@dataclass(frozen=True)
class MeanElements:
    """Mean-event elements: JDE = epoch + synodic_period*k, M = m0 + m1*k."""

    epoch: float
    synodic_period: float
    anomaly_at_epoch: float
    anomaly_rate: float


@dataclass(frozen=True)
class _Term:
    """One correction term: polynomial(T) * func(multiple * argument)."""

    func: Callable[[float], float]
    argument: str
    multiple: int
    coefficients: tuple[float, ...]


def _sin(multiple: int, *coefficients: float, argument: str = 'M') -> _Term:
    return _Term(math.sin, argument, multiple, coefficients)


def _cos(multiple: int, *coefficients: float, argument: str = 'M') -> _Term:
    return _Term(math.cos, argument, multiple, coefficients)


def _const(*coefficients: float) -> _Term:
    return _Term(math.cos, 'M', 0, coefficients)


_INFERIOR = PhenomenonKind.INFERIOR_CONJUNCTION
_SUPERIOR = PhenomenonKind.SUPERIOR_CONJUNCTION
_OPPOSITION = PhenomenonKind.OPPOSITION
_CONJUNCTION = PhenomenonKind.CONJUNCTION

# Meeus table 36.A.
MEAN_ELEMENTS: dict[tuple[BodyId, PhenomenonKind], MeanElements] = {
    (BodyId.MERCURY, _INFERIOR): MeanElements(2451612.023, 115.8774771, 63.5867, 114.2088742),
    (BodyId.MERCURY, _SUPERIOR): MeanElements(2451554.084, 115.8774771, 6.4822, 114.2088742),
    (BodyId.VENUS, _INFERIOR): MeanElements(2451996.706, 583.921361, 82.7311, 215.513058),
    (BodyId.VENUS, _SUPERIOR): MeanElements(2451704.746, 583.921361, 154.9745, 215.513058),
    (BodyId.MARS, _OPPOSITION): MeanElements(2452097.382, 779.936104, 181.9573, 48.705244),
    (BodyId.MARS, _CONJUNCTION): MeanElements(2451707.414, 779.936104, 157.6047, 48.705244),
    (BodyId.JUPITER, _OPPOSITION): MeanElements(2451870.628, 398.884046, 318.4681, 33.140229),
    (BodyId.JUPITER, _CONJUNCTION): MeanElements(2451671.186, 398.884046, 121.8980, 33.140229),
    (BodyId.SATURN, _OPPOSITION): MeanElements(2451870.170, 378.091904, 318.0172, 12.647487),
    (BodyId.SATURN, _CONJUNCTION): MeanElements(2451681.124, 378.091904, 131.6934, 12.647487),
    (BodyId.URANUS, _OPPOSITION): MeanElements(2451764.317, 369.656035, 213.6884, 4.333093),
    (BodyId.URANUS, _CONJUNCTION): MeanElements(2451579.489, 369.656035, 31.5219, 4.333093),
    (BodyId.NEPTUNE, _OPPOSITION): MeanElements(2451753.122, 367.486703, 202.6544, 2.194998),
    (BodyId.NEPTUNE, _CONJUNCTION): MeanElements(2451569.379, 367.486703, 21.5569, 2.194998),
}

_JUPITER_LONG_PERIOD = (
    _sin(1, 0.0, 0.0144, -0.00008, argument='a'),
    _cos(1, 0.3642, -0.0019, -0.00029, argument='a'),
)
_SATURN_LONG_PERIOD = (
    _sin(1, 0.0, -0.0337, 0.00018, argument='a'),
    _cos(1, -0.8510, 0.0044, 0.00068, argument='a'),
    _sin(1, 0.0, -0.0064, 0.00004, argument='b'),
    _cos(1, 0.2397, -0.0012, -0.00008, argument='b'),
    _sin(1, 0.0, -0.0010, argument='c'),
    _cos(1, 0.1245, 0.0006, argument='c'),
    _sin(1, 0.0, 0.0024, -0.00003, argument='d'),
    _cos(1, 0.0477, -0.0005, -0.00006, argument='d'),
)
_URANUS_LONG_PERIOD = (
    _cos(1, 0.8850, argument='e'),
    _cos(1, 0.2153, argument='f'),
)
_NEPTUNE_LONG_PERIOD = (
    _cos(1, -0.5964, argument='e'),
    _cos(1, 0.0728, argument='g'),
)

# Meeus ch. 36 correction series (days), coefficients ascending in T.
CORRECTIONS: dict[tuple[BodyId, PhenomenonKind], tuple[_Term, ...]] = {
    (BodyId.MERCURY, _INFERIOR): (
        _const(0.0545, 0.0002),
        _sin(1, -6.2008, 0.0074, 0.00003),
        _cos(1, -3.2750, -0.0197, 0.00001),
        _sin(2, 0.4737, -0.0052, -0.00001),
        _cos(2, 0.8111, 0.0033, -0.00002),
        _sin(3, 0.0037, 0.0018),
        _cos(3, -0.1768, 0.0, 0.00001),
        _sin(4, -0.0211, -0.0004),
        _cos(4, 0.0326, -0.0003),
        _sin(5, 0.0083, 0.0001),
        _cos(5, -0.0040, 0.0001),
    ),
    (BodyId.MERCURY, _SUPERIOR): (
        _const(-0.0548, -0.0002),
        _sin(1, 7.3894, -0.0100, -0.00003),
        _cos(1, 3.2200, 0.0197, -0.00001),
        _sin(2, 0.8383, -0.0064, -0.00001),
        _cos(2, 0.9666, 0.0039, -0.00003),
        _sin(3, 0.0770, -0.0026),
        _cos(3, 0.2758, 0.0002, -0.00002),
        _sin(4, -0.0128, -0.0008),
        _cos(4, 0.0734, -0.0004, -0.00001),
        _sin(5, -0.0122, -0.0002),
        _cos(5, 0.0173, -0.0002),
    ),
    (BodyId.VENUS, _INFERIOR): (
        _const(-0.0096, 0.0002, -0.00001),
        _sin(1, 2.0009, -0.0033, -0.00001),
        _cos(1, 0.5980, -0.0104, 0.00001),
        _sin(2, 0.0967, -0.0018, -0.00003),
        _cos(2, 0.0913, 0.0009, -0.00002),
        _sin(3, 0.0046, -0.0002),
        _cos(3, 0.0079, 0.0001),
    ),
    (BodyId.VENUS, _SUPERIOR): (
        _const(0.0099, -0.0002, -0.00001),
        _sin(1, 4.1991, -0.0121, -0.00003),
        _cos(1, -0.6095, 0.0102, -0.00002),
        _sin(2, 0.2500, -0.0028, -0.00003),
        _cos(2, 0.0063, 0.0025, -0.00002),
        _sin(3, 0.0232, -0.0005, -0.00001),
        _cos(3, 0.0031, 0.0004),
    ),
    (BodyId.MARS, _OPPOSITION): (
        _const(-0.3088, 0.0, 0.00002),
        _sin(1, -17.6965, 0.0363, 0.00005),
        _cos(1, 18.3131, 0.0467, -0.00006),
        _sin(2, -0.2162, -0.0198, -0.00001),
        _cos(2, -4.5028, -0.0019, 0.00007),
        _sin(3, 0.8987, 0.0058, -0.00002),
        _cos(3, 0.7666, -0.0050, -0.00003),
        _sin(4, -0.3636, -0.0001, 0.00002),
        _cos(4, 0.0402, 0.0032),
        _sin(5, 0.0737, -0.0008),
        _cos(5, -0.0980, -0.0011),
    ),
    (BodyId.MARS, _CONJUNCTION): (
        _const(0.3102, -0.0001, 0.00001),
        _sin(1, 9.7273, -0.0156, 0.00001),
        _cos(1, -18.3195, -0.0467, 0.00009),
        _sin(2, -1.6488, -0.0133, 0.00001),
        _cos(2, -2.6117, -0.0020, 0.00004),
        _sin(3, -0.6827, -0.0026, 0.00001),
        _cos(3, 0.0281, 0.0035, 0.00001),
        _sin(4, -0.0823, 0.0006, 0.00001),
        _cos(4, 0.1584, 0.0013),
        _sin(5, 0.0270, 0.0005),
        _cos(5, 0.0433),
    ),
    (BodyId.JUPITER, _OPPOSITION): (
        _const(-0.1029, 0.0, -0.00009),
        _sin(1, -1.9658, -0.0056, 0.00007),
        _cos(1, 6.1537, 0.0210, -0.00006),
        _sin(2, -0.2081, -0.0013),
        _cos(2, -0.1116, -0.0010),
        _sin(3, 0.0074, 0.0001),
        _cos(3, -0.0097, -0.0001),
        *_JUPITER_LONG_PERIOD,
    ),
    (BodyId.JUPITER, _CONJUNCTION): (
        _const(0.1027, 0.0002, -0.00009),
        _sin(1, -2.2637, 0.0163, -0.00003),
        _cos(1, -6.1540, -0.0210, 0.00008),
        _sin(2, -0.2021, -0.0017, 0.00001),
        _cos(2, 0.1310, -0.0008),
        _sin(3, 0.0086),
        _cos(3, 0.0087, 0.0002),
        *_JUPITER_LONG_PERIOD,
    ),
    (BodyId.SATURN, _OPPOSITION): (
        _const(-0.0209, 0.0006, 0.00023),
        _sin(1, 4.5795, -0.0312, -0.00017),
        _cos(1, 1.1462, -0.0351, 0.00011),
        _sin(2, 0.0985, -0.0015),
        _cos(2, 0.0733, -0.0031, 0.00001),
        _sin(3, 0.0025, -0.0001),
        _cos(3, 0.0050, -0.0002),
        *_SATURN_LONG_PERIOD,
    ),
    (BodyId.SATURN, _CONJUNCTION): (
        _const(0.0172, -0.0006, 0.00023),
        _sin(1, -8.5885, 0.0411, 0.00020),
        _cos(1, -1.1470, 0.0352, -0.00011),
        _sin(2, 0.3331, -0.0034, -0.00001),
        _cos(2, 0.1145, -0.0045, 0.00002),
        _sin(3, -0.0169, 0.0002),
        _cos(3, -0.0109, 0.0004),
        *_SATURN_LONG_PERIOD,
    ),
    (BodyId.URANUS, _OPPOSITION): (
        _const(0.0844, -0.0006),
        _sin(1, -0.1048, 0.0246),
        _cos(1, -5.1221, 0.0104, 0.00003),
        _sin(2, -0.1428, 0.0005),
        _cos(2, -0.0148, -0.0013),
        _cos(3, 0.0055),
        *_URANUS_LONG_PERIOD,
    ),
    (BodyId.URANUS, _CONJUNCTION): (
        _const(-0.0859, 0.0003),
        _sin(1, -3.8179, -0.0148, 0.00003),
        _cos(1, 5.1228, -0.0105, -0.00002),
        _sin(2, -0.0803, 0.0011),
        _cos(2, -0.1905, -0.0006),
        _sin(3, 0.0088, 0.0001),
        *_URANUS_LONG_PERIOD,
    ),
    (BodyId.NEPTUNE, _OPPOSITION): (
        _const(-0.0140, 0.0, 0.00001),
        _sin(1, -1.3486, 0.0010, 0.00001),
        _cos(1, 0.8597, 0.0037),
        _sin(2, -0.0082, -0.0002, 0.00001),
        _cos(2, 0.0037, -0.0003),
        *_NEPTUNE_LONG_PERIOD,
    ),
    (BodyId.NEPTUNE, _CONJUNCTION): (
        _const(0.0168),
        _sin(1, -2.5606, 0.0088, 0.00002),
        _cos(1, -0.8611, -0.0037, 0.00002),
        _sin(2, 0.0118, -0.0004, 0.00001),
        _cos(2, 0.0307, -0.0003),
        *_NEPTUNE_LONG_PERIOD,
    ),
}

# Long-period arguments (degrees) as (value at J2000, rate per Julian century).
LONG_PERIOD_ARGUMENTS: dict[str, tuple[float, float]] = {
    'a': (82.74, 40.76),
    'b': (29.86, 1181.36),
    'c': (14.13, 590.68),
    'd': (220.02, 1262.87),
    'e': (207.83, 8.51),
    'f': (108.84, 419.96),
    'g': (276.74, 209.98),
}

_INNER_PLANETS = frozenset({BodyId.MERCURY, BodyId.VENUS})
_SUPPORTED_BODIES = frozenset(body for body, _ in MEAN_ELEMENTS)

# Superior planets have no inferior/superior distinction.
_SUPERIOR_PLANET_ALIASES = {
    _INFERIOR: _OPPOSITION,
    _SUPERIOR: _CONJUNCTION,
}


def resolve_kind(body: BodyId, kind: PhenomenonKind) -> PhenomenonKind:
    """Map a requested kind to the tabulated kind for the body.

    For superior planets SUPERIOR_CONJUNCTION means CONJUNCTION and
    INFERIOR_CONJUNCTION means OPPOSITION.

    Raises:
        UnsupportedBodyError: If the body has no phenomena tables.
        UnsupportedPhenomenonError: If the kind is not tabulated for the body.
    """
    if not isinstance(body, BodyId) or body not in _SUPPORTED_BODIES:
        raise UnsupportedBodyError(body, kind)
    if body not in _INNER_PLANETS:
        kind = _SUPERIOR_PLANET_ALIASES.get(kind, kind)
    if (body, kind) not in MEAN_ELEMENTS:
        raise UnsupportedPhenomenonError(body, kind)
    return kind


def _phase(kind: PhenomenonKind) -> float:
    return 0.5 if kind is _OPPOSITION else 0.0


def periodicity_estimate(body: BodyId, kind: PhenomenonKind, year: float) -> float:
    """Periodicity estimate K for the event nearest the given year.

    K is an integer for conjunctions and an integer plus one half for
    oppositions, counted from the body's reference conjunction.

    Parameters:
        body: Planet (Mercury to Neptune).
        kind: Requested phenomenon.
        year: Decimal year (e.g. 1993.75).

    Returns:
        K as a float.
    """
    kind = resolve_kind(body, kind)
    phase = _phase(kind)
    reference = MEAN_ELEMENTS[(body, _CONJUNCTION if phase else kind)]
    x = (DAYS_PER_GREGORIAN_YEAR * year + _YEAR_ZERO_JD - reference.epoch) / reference.synodic_period
    return math.floor(x - phase + 0.5) + phase


def _cycles(kind: PhenomenonKind, k: float) -> float:
    n = k - _phase(kind)
    if not float(n).is_integer():
        raise ValueError(f'K={k} is not a valid periodicity for {kind.value}')
    return n


def mean_epoch(body: BodyId, kind: PhenomenonKind, k: float) -> float:
    """JDE of the mean phenomenon for periodicity K."""
    kind = resolve_kind(body, kind)
    elements = MEAN_ELEMENTS[(body, kind)]
    return elements.epoch + elements.synodic_period * _cycles(kind, k)


def correction(body: BodyId, kind: PhenomenonKind, k: float) -> float:
    """Days to add to the mean epoch to get the true epoch."""
    kind = resolve_kind(body, kind)
    elements = MEAN_ELEMENTS[(body, kind)]
    n = _cycles(kind, k)
    jde = elements.epoch + elements.synodic_period * n
    t = (jde - JD_J2000) / DAYS_PER_JULIAN_CENTURY
    arguments = {'M': math.radians(elements.anomaly_at_epoch + elements.anomaly_rate * n)}
    for name, (value, rate) in LONG_PERIOD_ARGUMENTS.items():
        arguments[name] = math.radians(value + rate * t)
    total = 0.0
    for term in CORRECTIONS[(body, kind)]:
        amplitude = float(P.polyval(t, term.coefficients))
        total += amplitude * term.func(term.multiple * arguments[term.argument])
    return total


def true_epoch(body: BodyId, kind: PhenomenonKind, k: float) -> float:
    """JDE of the true phenomenon for periodicity K."""
    return mean_epoch(body, kind, k) + correction(body, kind, k)


def find(body: BodyId, kind: PhenomenonKind, after_year: float, mean: bool = True) -> JulianDay:
    """Day count of the phenomenon nearest the given decimal year.

    Parameters:
        body: Planet (Mercury to Neptune).
        kind: Requested phenomenon; see resolve_kind for superior-planet aliases.
        after_year: Decimal year the search starts from.
        mean: If True return the mean epoch, otherwise apply the periodic terms.

    Returns:
        JulianDay of the event.

    Raises:
        UnsupportedBodyError: For the Sun, Moon, Earth, and Pluto.
        UnsupportedPhenomenonError: For kinds not tabulated for the body.
    """
    k = periodicity_estimate(body, kind, after_year)
    jde = mean_epoch(body, kind, k) if mean else true_epoch(body, kind, k)
    logger.debug(
        '%s %s near %.3f: K=%s, %s JDE=%.6f',
        body.name.title(),
        kind.value,
        after_year,
        k,
        'mean' if mean else 'true',
        jde,
    )
    return JulianDay(jde)
