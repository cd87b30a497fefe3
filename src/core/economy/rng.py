"""난수 소스 — 주입 가능한 균등 난수 생성기

모든 추첨은 random() 하나만 사용한다.
테스트에서는 시드 고정 random.Random 또는 값을 차례로 돌려주는 소스를 주입.
"""

import math
import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        """[0, 1) 균등 난수."""
        ...


def default_source() -> RandomSource:
    """프로세스 전역 random 모듈."""
    return random  # type: ignore[return-value]


def random_float(rng: RandomSource, low: float, high: float) -> float:
    """[low, high) 균등 실수."""
    return rng.random() * (high - low) + low


def random_int(rng: RandomSource, low: int, high: int) -> int:
    """[low, high] 균등 정수 (양끝 포함)."""
    low = math.ceil(low)
    high = math.floor(high)
    return math.floor(rng.random() * (high - low + 1)) + low


def random_choice(rng: RandomSource, items: Sequence[T]) -> T:
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return items[math.floor(rng.random() * len(items))]


class ScriptedSource:
    """미리 정한 값을 순서대로 돌려주는 소스. 소진되면 fallback 사용."""

    def __init__(
        self, values: Sequence[float], fallback: Optional[RandomSource] = None
    ) -> None:
        self._values = list(values)
        self._pos = 0
        self._fallback = fallback

    def random(self) -> float:
        if self._pos < len(self._values):
            value = self._values[self._pos]
            self._pos += 1
            return value
        if self._fallback is None:
            raise IndexError("scripted random source exhausted")
        return self._fallback.random()

    @property
    def consumed(self) -> int:
        return self._pos
