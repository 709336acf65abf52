from concurrent.futures import Future
from typing import Any, Callable, Type

from amino import Maybe, Just, Nothing
from amino.case import Case

from amino_hamcrest.matcher import AminoMatcher
from amino_hamcrest.description import Describe, type_name
from amino_hamcrest.timeout import TimeoutSetting, NoTimeout, Timeout, TimeUnit, Outcome
from amino_hamcrest.data import (ValueExpectation, AnyValue, EqualValue, MatchingValue, SatisfyingValue,
                                 CauseExpectation, AnyCause, CauseOfType, MatchingCause, SatisfyingCause,
                                 OutcomeExpectation, Succeeds, Fails)
from amino_hamcrest.wait import await_future, check_awaited, reject


class describe_value(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('with value ').value(a.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('with value matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('with value matching predicate ').value(a.desc)


class describe_cause(Case[CauseExpectation, Describe], alg=CauseExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyCause) -> Describe:
        return self.desc

    def of_type(self, a: CauseOfType) -> Describe:
        self.desc.clause('with exception of type ').value(type_name(a.tpe))
        a.message % (lambda m: self.desc.text(' and message ').value(m))
        return self.desc

    def matching(self, a: MatchingCause) -> Describe:
        return self.desc.clause('with exception matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingCause) -> Describe:
        return self.desc.clause('with exception matching predicate ').value(a.desc)


class describe_outcome(Case[OutcomeExpectation, Describe], alg=OutcomeExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def succeeds(self, a: Succeeds) -> Describe:
        return describe_value(self.desc.clause('that succeeds'))(a.value)

    def fails(self, a: Fails) -> Describe:
        return describe_cause(self.desc.clause('that fails'))(a.cause)


class value_mismatch(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe, value: Any) -> None:
        self.desc = desc
        self.value = value

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('with value ').value(self.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('with value ').value(self.value).nested_mismatch(a.matcher, self.value)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('with value ').value(self.value).text(' not satisfying ').value(a.desc)


def check_value(desc: Describe, expectation: ValueExpectation, value: Any) -> bool:
    return expectation.accepts(value) or reject(value_mismatch(desc.clause('that succeeds'), value)(expectation))


def with_cause(desc: Describe, cause: Maybe[BaseException], check: Callable[[BaseException], bool]) -> bool:
    return cause.map(check).get_or(lambda: reject(desc.failure(Nothing)))


class check_cause(Case[CauseExpectation, bool], alg=CauseExpectation):

    def __init__(self, desc: Describe, cause: Maybe[BaseException]) -> None:
        self.desc = desc
        self.cause = cause

    def any(self, a: AnyCause) -> bool:
        return True

    def of_type(self, a: CauseOfType) -> bool:
        self.desc.failure(self.cause)
        return self.cause.map(a.accepts).get_or_strict(False)

    def matching(self, a: MatchingCause) -> bool:
        return with_cause(
            self.desc,
            self.cause,
            lambda e: a.accepts(e) or reject(self.desc.clause('that fails, because ').mismatch(a.matcher, e)),
        )

    def satisfying(self, a: SatisfyingCause) -> bool:
        return with_cause(
            self.desc,
            self.cause,
            lambda e: a.accepts(e) or reject(self.desc.clause('that fails, with exception not matching predicate ')
                                             .value(a.desc)),
        )


class check_outcome(Case[OutcomeExpectation, bool], alg=OutcomeExpectation):

    def __init__(self, desc: Describe, outcome: Outcome) -> None:
        self.desc = desc
        self.outcome = outcome

    def succeeds(self, a: Succeeds) -> bool:
        return self.outcome.cata(
            lambda cause: reject(self.desc.failure(cause)),
            lambda value: check_value(self.desc, a.value, value),
        )

    def fails(self, a: Fails) -> bool:
        return self.outcome.cata(
            lambda cause: check_cause(self.desc, cause)(a.cause),
            lambda value: reject(self.desc.success(value)),
        )


class FutureMatcher(AminoMatcher[Future]):
    '''Waits for a `concurrent.futures.Future` to complete, optionally bounded by a timeout, and checks its outcome.
    A future that is still pending after the timeout, or that failed with a `TimeoutError`, never matches.
    '''

    subject_type = Future

    def __init__(self, expectation: OutcomeExpectation, timeout: TimeoutSetting=NoTimeout()) -> None:
        self.expectation = expectation
        self.timeout = timeout

    def new_instance(self, timeout: TimeoutSetting) -> 'FutureMatcher':
        return FutureMatcher(self.expectation, timeout)

    def with_timeout(self, amount: int, unit: TimeUnit=TimeUnit.SECONDS) -> 'FutureMatcher':
        return self.new_instance(Timeout.cons(amount, unit))

    def matches_safely(self, item: Future, desc: Describe) -> bool:
        awaited = await_future(item)(self.timeout)
        return check_awaited('Future', desc, lambda outcome: check_outcome(desc, outcome)(self.expectation))(awaited)

    def describe(self, desc: Describe) -> None:
        describe_outcome(desc.container('Future').timeout(self.timeout))(self.expectation)


class FailedFutureOfType(FutureMatcher):

    def __init__(
            self,
            tpe: Type[BaseException],
            message: Maybe[str]=Nothing,
            timeout: TimeoutSetting=NoTimeout(),
    ) -> None:
        super().__init__(Fails(CauseOfType(tpe, message)), timeout)
        self.tpe = tpe
        self.message = message

    def new_instance(self, timeout: TimeoutSetting) -> 'FailedFutureOfType':
        return FailedFutureOfType(self.tpe, self.message, timeout)

    def with_message(self, message: str) -> 'FailedFutureOfType':
        return FailedFutureOfType(self.tpe, Just(message), self.timeout)


__all__ = ('FutureMatcher', 'FailedFutureOfType')
