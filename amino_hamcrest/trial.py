from typing import Any

from amino import Either
from amino.case import Case

from amino_hamcrest.matcher import AminoMatcher
from amino_hamcrest.description import Describe, type_name
from amino_hamcrest.data import (ValueExpectation, AnyValue, EqualValue, MatchingValue, SatisfyingValue,
                                 CauseExpectation, AnyCause, CauseOfType, MatchingCause, SatisfyingCause)


class describe_success(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('with value ').value(a.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('matching ').value(a.desc)


class success_mismatch(Case[ValueExpectation, Describe], alg=ValueExpectation):

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
        return (
            self.desc
            .clause('which does not match ')
            .value(a.desc)
            .text(', because the value is equal to ')
            .value(self.value)
        )


class describe_failure(Case[CauseExpectation, Describe], alg=CauseExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyCause) -> Describe:
        return self.desc

    def of_type(self, a: CauseOfType) -> Describe:
        return self.desc.clause('with exception of type ').value(type_name(a.tpe))

    def matching(self, a: MatchingCause) -> Describe:
        return self.desc.clause('matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingCause) -> Describe:
        return self.desc.clause('with throwable matching ').value(a.desc)


class failure_mismatch(Case[CauseExpectation, Describe], alg=CauseExpectation):

    def __init__(self, desc: Describe, cause: BaseException) -> None:
        self.desc = desc
        self.cause = cause

    def any(self, a: AnyCause) -> Describe:
        return self.desc

    def of_type(self, a: CauseOfType) -> Describe:
        return self.desc.exception_type(self.cause)

    def matching(self, a: MatchingCause) -> Describe:
        return self.desc.exception_type(self.cause).nested_mismatch(a.matcher, self.cause)

    def satisfying(self, a: SatisfyingCause) -> Describe:
        return (
            self.desc
            .clause('not matching ')
            .value(a.desc)
            .clause('and exception ')
            .value(type_name(type(self.cause)))
        )


class SuccessMatcher(AminoMatcher[Either]):
    '''Matches the `Right` of an `Either` produced by `amino.Try`.
    '''

    subject_type = Either

    def __init__(self, expectation: ValueExpectation) -> None:
        self.expectation = expectation

    def matches_safely(self, item: Either, desc: Describe) -> bool:
        if item.is_left:
            desc.container('failure').clause('with exception of type ').value(type(item.value))
            return False
        value = item.value
        if self.expectation.accepts(value):
            return True
        success_mismatch(desc.container('success'), value)(self.expectation)
        return False

    def describe(self, desc: Describe) -> None:
        describe_success(desc.container('success'))(self.expectation)


class FailureMatcher(AminoMatcher[Either]):
    '''Matches the `Left` of an `Either` produced by `amino.Try`, which holds the raised exception.
    '''

    subject_type = Either

    def __init__(self, expectation: CauseExpectation) -> None:
        self.expectation = expectation

    def matches_safely(self, item: Either, desc: Describe) -> bool:
        if item.is_right:
            desc.container('success').clause('with value ').value(item.value)
            return False
        cause = item.value
        if self.expectation.accepts(cause):
            return True
        failure_mismatch(desc.container('failure'), cause)(self.expectation)
        return False

    def describe(self, desc: Describe) -> None:
        describe_failure(desc.container('failure'))(self.expectation)


__all__ = ('SuccessMatcher', 'FailureMatcher')
