"""Portable pseudo-random generators: subtractive, minimal-standard and Gaussian."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _c_remainder(a: int, b: int) -> int:
    """Remainder that truncates toward zero, as integer division does in C."""
    r = abs(a) % b
    return r if a >= 0 else -r


_MBIG = 1_000_000_000
_MSEED = 161_803_398
_FAC = 1.0 / _MBIG


class Ran3:
    """Knuth's subtractive generator giving uniform deviates in [0, 1).

    Only the magnitude of the seed matters.
    """

    def __init__(self, seed: int) -> None:
        mj = _c_remainder(_MSEED - abs(seed), _MBIG)
        ma = [0] * 56
        ma[55] = mj
        mk = 1
        for i in range(1, 55):
            ii = (21 * i) % 55
            ma[ii] = mk
            mk = mj - mk
            if mk < 0:
                mk += _MBIG
            mj = ma[ii]
        for _ in range(4):
            for i in range(1, 56):
                ma[i] -= ma[1 + (i + 30) % 55]
                if ma[i] < 0:
                    ma[i] += _MBIG
        self._ma = ma
        self._inext = 0
        self._inextp = 31

    def random(self) -> float:
        """Return the next uniform deviate."""
        self._inext = self._inext % 55 + 1
        self._inextp = self._inextp % 55 + 1
        mj = self._ma[self._inext] - self._ma[self._inextp]
        if mj < 0:
            mj += _MBIG
        self._ma[self._inext] = mj
        return _f32(mj * _FAC)

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()


_IA = 16807
_IM = 2147483647
_AM = 1.0 / _IM
_IQ = 127773
_IR = 2836
_NTAB = 32
_NDIV = 1 + (_IM - 1) // _NTAB
_EPS = 1.2e-7
_RNMX = 1.0 - _EPS


def _park_miller(idum: int) -> int:
    k = idum // _IQ
    idum = _IA * (idum - k * _IQ) - _IR * k
    if idum < 0:
        idum += _IM
    return idum


class Ran1:
    """Minimal-standard generator with Bays-Durham shuffle, deviates in (0, 1).

    A negative seed selects the stream; zero and positive seeds all start
    the same stream as a seed of -1.
    """

    def __init__(self, seed: int) -> None:
        idum = 1 if -seed < 1 else -seed
        shuffle = [0] * _NTAB
        for j in range(_NTAB + 7, -1, -1):
            idum = _park_miller(idum)
            if j < _NTAB:
                shuffle[j] = idum
        self._idum = idum
        self._shuffle = shuffle
        self._iy = shuffle[0]

    def random(self) -> float:
        """Return the next uniform deviate."""
        self._idum = _park_miller(self._idum)
        j = self._iy // _NDIV
        self._iy = self._shuffle[j]
        self._shuffle[j] = self._idum
        value = _f32(_AM * self._iy)
        return _f32(_RNMX) if value > _RNMX else value

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()


class GaussianDeviate:
    """Normally distributed deviates (zero mean, unit variance) by the polar method."""

    def __init__(self, seed: int) -> None:
        self._uniform = Ran1(seed)
        self._spare: float | None = None

    def random(self) -> float:
        """Return the next normal deviate."""
        if self._spare is not None:
            value, self._spare = self._spare, None
            return value
        while True:
            v1 = _f32(2.0 * self._uniform.random() - 1.0)
            v2 = _f32(2.0 * self._uniform.random() - 1.0)
            rsq = _f32(_f32(v1 * v1) + _f32(v2 * v2))
            if 0.0 < rsq < 1.0:
                break
        fac = _f32(math.sqrt(-2.0 * math.log(rsq) / rsq))
        self._spare = _f32(v1 * fac)
        return _f32(v2 * fac)

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()