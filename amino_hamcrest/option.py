from typing import Any

from amino import Maybe
from amino.case import Case

from amino_hamcrest.matcher import AminoMatcher
from amino_hamcrest.description import Describe
from amino_hamcrest.data import ValueExpectation, AnyValue, EqualValue, MatchingValue, SatisfyingValue


class describe_option(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def any(self, a: AnyValue) -> Describe:
        return self.desc.text(' with a value')

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.text(' with a value equal to ').value(a.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.text(' with a value matching ').expected(a.matcher)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return self.desc.text(' with a value matching ').value(a.desc)


class option_mismatch(Case[ValueExpectation, Describe], alg=ValueExpectation):

    def __init__(self, desc: Describe, value: Any) -> None:
        self.desc = desc
        self.value = value

    def any(self, a: AnyValue) -> Describe:
        return self.desc

    def equal(self, a: EqualValue) -> Describe:
        return self.desc.text(' with a value equal to ').value(self.value)

    def matching(self, a: MatchingValue) -> Describe:
        return self.desc.text(' with value ').value(self.value).nested_mismatch(a.matcher, self.value)

    def satisfying(self, a: SatisfyingValue) -> Describe:
        return (
            self.desc
            .text(' with a value not matching ')
            .value(a.desc)
            .text(', because the value is equal to ')
            .value(self.value)
        )


class DefinedOption(AminoMatcher[Maybe]):
    subject_type = Maybe

    def __init__(self, expectation: ValueExpectation) -> None:
        self.expectation = expectation

    def matches_safely(self, item: Maybe, desc: Describe) -> bool:
        if not item.is_just:
            desc.container('empty Option')
            return False
        value = item.get_or_strict(None)
        if self.expectation.accepts(value):
            return True
        option_mismatch(desc.container('Option'), value)(self.expectation)
        return False

    def describe(self, desc: Describe) -> None:
        describe_option(desc.container('Option'))(self.expectation)


class EmptyOption(AminoMatcher[Maybe]):
    subject_type = Maybe

    def matches_safely(self, item: Maybe, desc: Describe) -> bool:
        if item.is_just:
            desc.container('Option').text(' with a value equal to ').value(item.get_or_strict(None))
            return False
        return True

    def describe(self, desc: Describe) -> None:
        desc.container('empty Option')


__all__ = ('DefinedOption', 'EmptyOption')
