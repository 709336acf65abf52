from enum import Enum
from typing import Any

from amino import ADT, Either, Maybe


class TimeUnit(Enum):
    NANOSECONDS = 1e-9
    MICROSECONDS = 1e-6
    MILLISECONDS = 1e-3
    SECONDS = 1.
    MINUTES = 60.
    HOURS = 3600.
    DAYS = 86400.

    @property
    def label(self) -> str:
        return self.name.lower()

    def seconds(self, amount: int) -> float:
        return amount * self.value


class TimeoutSetting(ADT['TimeoutSetting']):
    pass


class NoTimeout(TimeoutSetting):
    pass


class Timeout(TimeoutSetting):

    @staticmethod
    def cons(amount: int, unit: TimeUnit=TimeUnit.SECONDS) -> 'Timeout':
        return Timeout(amount, unit)

    def __init__(self, amount: int, unit: TimeUnit) -> None:
        self.amount = amount
        self.unit = unit

    @property
    def valid(self) -> bool:
        return self.amount > 0

    @property
    def seconds(self) -> float:
        return self.unit.seconds(self.amount)


Outcome = Either[Maybe[BaseException], Any]


class Awaited(ADT['Awaited']):
    pass


class Completed(Awaited):

    def __init__(self, outcome: Outcome) -> None:
        self.outcome = outcome


class TimedOut(Awaited):
    pass


class InvalidTimeout(Awaited):

    def __init__(self, amount: int) -> None:
        self.amount = amount


__all__ = ('TimeUnit', 'TimeoutSetting', 'NoTimeout', 'Timeout', 'Outcome', 'Awaited', 'Completed', 'TimedOut',
           'InvalidTimeout')
