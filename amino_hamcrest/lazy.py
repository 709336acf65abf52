from concurrent.futures import Executor, ThreadPoolExecutor
from threading import Lock
from typing import Any

from amino import Maybe, Just, Nothing, Try, Eval
from amino.case import Case

from amino_hamcrest import options
from amino_hamcrest.logging import hamcrest_logger
from amino_hamcrest.matcher import AminoMatcher
from amino_hamcrest.description import Describe
from amino_hamcrest.timeout import TimeoutSetting, NoTimeout, Timeout, TimeUnit, Awaited, Completed, InvalidTimeout
from amino_hamcrest.data import ValueExpectation, AnyValue, EqualValue, MatchingValue, SatisfyingValue
from amino_hamcrest.wait import await_future, check_awaited, reject

log = hamcrest_logger('lazy')
executor_lock = Lock()
default_executor: Maybe[Executor] = Nothing


def lazy_workers() -> Maybe[int]:
    workers = options.lazy_workers.value.flat_map(lambda a: Try(int, a).to_maybe)
    return workers.flat_map(lambda a: Just(a) if a > 0 else Nothing)


def shared_executor() -> Executor:
    global default_executor
    with executor_lock:
        if not default_executor.is_just:
            workers = lazy_workers()
            log.debug(f'creating lazy executor with {workers.get_or_strict("default")} workers')
            default_executor = Just(
                ThreadPoolExecutor(max_workers=workers.get_or_strict(None), thread_name_prefix='amino_hamcrest_lazy')
            )
        return default_executor.get_or_strict(None)


def force(lazy: Eval) -> Any:
    return lazy.value


class force_lazy(Case[TimeoutSetting, Awaited], alg=TimeoutSetting):

    def __init__(self, lazy: Eval, executor: Maybe[Executor]) -> None:
        self.lazy = lazy
        self.executor = executor

    def no_timeout(self, setting: NoTimeout) -> Awaited:
        log.debug(f'forcing {self.lazy}')
        return Completed(Try(force, self.lazy).lmap(Just))

    def timeout(self, setting: Timeout) -> Awaited:
        if not setting.valid:
            return InvalidTimeout(setting.amount)
        executor = self.executor.get_or(shared_executor)
        log.debug(f'forcing {self.lazy} on {executor}')
        return await_future(executor.submit(force, self.lazy))(setting)


class describe_lazy(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('which yields value ').value(a.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('which yields value matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('which satisfies ').value(a.desc)


class lazy_mismatch(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe, value: Any) -> None:
        self.desc = desc
        self.value = value

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('which yields value ').value(self.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('which yields value ').value(self.value).nested_mismatch(a.matcher, self.value)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('which yields value ').value(self.value).clause('which does not satisfy ').value(a.desc)


class LazyMatcher(AminoMatcher[Eval]):
    '''Forces an `amino.Eval` and checks the value it yields.
    With a timeout, the evaluation runs on an executor, either the one given to `with_executor` or a shared thread
    pool that is created on first use.
    '''

    subject_type = Eval

    def __init__(self, expectation: ValueExpectation, timeout: TimeoutSetting=NoTimeout(),
                 executor: Maybe[Executor]=Nothing) -> None:
        self.expectation = expectation
        self.timeout = timeout
        self.executor = executor

    def with_timeout(self, amount: int, unit: TimeUnit=TimeUnit.SECONDS) -> 'LazyMatcher':
        return LazyMatcher(self.expectation, Timeout.cons(amount, unit), self.executor)

    def with_executor(self, executor: Executor) -> 'LazyMatcher':
        return LazyMatcher(self.expectation, self.timeout, Just(executor))

    def check(self, desc: Describe, value: Any) -> bool:
        return self.expectation.accepts(value) or reject(lazy_mismatch(desc, value)(self.expectation))

    def matches_safely(self, item: Eval, desc: Describe) -> bool:
        awaited = force_lazy(item, self.executor)(self.timeout)
        return check_awaited(
            'Lazy',
            desc,
            lambda outcome: outcome.cata(lambda cause: reject(desc.failure(cause)), lambda a: self.check(desc, a)),
        )(awaited)

    def describe(self, desc: Describe) -> None:
        describe_lazy(desc.container('Lazy').timeout(self.timeout))(self.expectation)


__all__ = ('LazyMatcher',)
