import abc
from typing import Any

from amino import ADT, Either
from amino.case import Case

from amino_hamcrest.matcher import AminoMatcher
from amino_hamcrest.description import Describe
from amino_hamcrest.data import ValueExpectation, AnyValue, EqualValue, MatchingValue, SatisfyingValue


class EitherSide(ADT['EitherSide']):

    @property
    @abc.abstractmethod
    def name(self) -> str:
        ...

    @property
    @abc.abstractmethod
    def other(self) -> 'EitherSide':
        ...

    @abc.abstractmethod
    def holds(self, either: Either) -> bool:
        ...

    @property
    def container(self) -> str:
        return f'{self.name} Either'


class LeftSide(EitherSide):

    @property
    def name(self) -> str:
        return 'left'

    @property
    def other(self) -> EitherSide:
        return RightSide()

    def holds(self, either: Either) -> bool:
        return either.is_left


class RightSide(EitherSide):

    @property
    def name(self) -> str:
        return 'right'

    @property
    def other(self) -> EitherSide:
        return LeftSide()

    def holds(self, either: Either) -> bool:
        return either.is_right


class describe_either(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.clause('with value ').value(a.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.clause('matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.clause('with a value matching ').value(a.desc)


class either_mismatch(Case[ValueExpectation, Describe], alg=ValueExpectation):

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
            .clause('with a value not matching ')
            .value(a.desc)
            .text(', because the value is equal to ')
            .value(self.value)
        )


class EitherMatcher(AminoMatcher[Either]):
    subject_type = Either

    def __init__(self, side: EitherSide, expectation: ValueExpectation) -> None:
        self.side = side
        self.expectation = expectation

    def matches_safely(self, item: Either, desc: Describe) -> bool:
        value = item.value
        if not self.side.holds(item):
            desc.container(self.side.other.container).clause('with value ').value(value)
            return False
        if self.expectation.accepts(value):
            return True
        either_mismatch(desc.container(self.side.container), value)(self.expectation)
        return False

    def describe(self, desc: Describe) -> None:
        describe_either(desc.container(self.side.container))(self.expectation)


__all__ = ('EitherSide', 'LeftSide', 'RightSide', 'EitherMatcher')
