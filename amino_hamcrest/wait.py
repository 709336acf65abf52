from concurrent.futures import Future, CancelledError, TimeoutError
from typing import Callable, Optional

from amino import Left, Right, Just, Nothing
from amino.case import Case

from amino_hamcrest.logging import hamcrest_logger
from amino_hamcrest.description import Describe
from amino_hamcrest.timeout import (TimeoutSetting, NoTimeout, Timeout, Outcome, Awaited, Completed, TimedOut,
                                    InvalidTimeout)

log = hamcrest_logger('wait')


def future_outcome(future: Future) -> Outcome:
    if future.cancelled():
        return Left(Nothing)
    error = future.exception()
    return Right(future.result()) if error is None else Left(Just(error))


def is_timeout(outcome: Outcome) -> bool:
    return outcome.cata(lambda cause: cause.map(lambda a: isinstance(a, TimeoutError)).get_or_strict(False),
                        lambda a: False)


def completed(future: Future) -> Awaited:
    outcome = future_outcome(future)
    return TimedOut() if is_timeout(outcome) else Completed(outcome)


def wait_for(future: Future, seconds: Optional[float]) -> Awaited:
    try:
        future.exception(seconds)
    except CancelledError:
        log.debug(f'{future} was cancelled')
    except TimeoutError:
        log.debug(f'timed out waiting for {future}')
        return TimedOut()
    return completed(future)


class await_future(Case[TimeoutSetting, Awaited], alg=TimeoutSetting):

    def __init__(self, future: Future) -> None:
        self.future = future

    def no_timeout(self, setting: NoTimeout) -> Awaited:
        log.debug(f'waiting for {self.future}')
        return wait_for(self.future, None)

    def timeout(self, setting: Timeout) -> Awaited:
        if setting.valid:
            log.debug(f'waiting {setting.amount} {setting.unit.label} for {self.future}')
            return wait_for(self.future, setting.seconds)
        log.debug(f'invalid timeout {setting.amount}, not waiting for {self.future}')
        return InvalidTimeout(setting.amount)


class check_awaited(Case[Awaited, bool], alg=Awaited):

    def __init__(self, container: str, desc: Describe, check: Callable[[Outcome], bool]) -> None:
        self.container = container
        self.desc = desc
        self.check = check

    def completed(self, awaited: Completed) -> bool:
        self.desc.container(self.container)
        return self.check(awaited.outcome)

    def timed_out(self, awaited: TimedOut) -> bool:
        self.desc.container(self.container).timed_out()
        return False

    def invalid_timeout(self, awaited: InvalidTimeout) -> bool:
        self.desc.invalid_timeout(awaited.amount)
        return False


def reject(desc: Describe) -> bool:
    return False


__all__ = ('future_outcome', 'is_timeout', 'completed', 'wait_for', 'await_future', 'check_awaited', 'reject')
