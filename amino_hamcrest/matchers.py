from typing import Any, Callable

from amino import Nothing

from amino_hamcrest.description import description_of, mismatch_of
from amino_hamcrest.data import (value_expectation, cause_expectation, is_exception_type, Succeeds, Fails,
                                 SatisfyingValue, SatisfyingCause, Predicate)
from amino_hamcrest.option import DefinedOption, EmptyOption
from amino_hamcrest.either import EitherMatcher, LeftSide, RightSide
from amino_hamcrest.trial import SuccessMatcher, FailureMatcher
from amino_hamcrest.future import FutureMatcher, FailedFutureOfType
from amino_hamcrest.lazy import LazyMatcher


def is_defined_option(*args: Any) -> DefinedOption:
    return DefinedOption(value_expectation(args))


def is_empty_option() -> EmptyOption:
    return EmptyOption()


is_some = is_defined_option
is_none = is_empty_option


def is_left(*args: Any) -> EitherMatcher:
    return EitherMatcher(LeftSide(), value_expectation(args))


def is_right(*args: Any) -> EitherMatcher:
    return EitherMatcher(RightSide(), value_expectation(args))


def is_success(*args: Any) -> SuccessMatcher:
    return SuccessMatcher(value_expectation(args))


def is_failure(*args: Any) -> FailureMatcher:
    return FailureMatcher(cause_expectation(args))


def is_future(*args: Any) -> FutureMatcher:
    if len(args) > 1:
        raise TypeError(f'use `is_future_matching` for predicates, got {args}')
    return FutureMatcher(Succeeds(value_expectation(args)))


def is_future_matching(desc: str, predicate: Predicate) -> FutureMatcher:
    return FutureMatcher(Succeeds(SatisfyingValue(desc, predicate)))


def is_failed_future(*args: Any) -> FutureMatcher:
    if len(args) == 1 and is_exception_type(args[0]):
        return FailedFutureOfType(args[0], Nothing)
    if len(args) > 1:
        raise TypeError(f'use `is_failed_future_matching` for predicates, got {args}')
    return FutureMatcher(Fails(cause_expectation(args)))


def is_failed_future_matching(desc: str, predicate: Callable[[BaseException], bool]) -> FutureMatcher:
    return FutureMatcher(Fails(SatisfyingCause(desc, predicate)))


def is_lazy(*args: Any) -> LazyMatcher:
    if len(args) > 1:
        raise TypeError(f'use `is_lazy_matching` for predicates, got {args}')
    return LazyMatcher(value_expectation(args))


def is_lazy_matching(desc: str, predicate: Predicate) -> LazyMatcher:
    return LazyMatcher(SatisfyingValue(desc, predicate))


class AMMeta(type):

    def __call__(self, *a: Any, **kw: Any) -> None:
        raise TypeError('`AM` is a namespace of matcher factories and cannot be instantiated')

    def some(self, *args: Any) -> DefinedOption:
        return is_some(*args)

    def none(self) -> EmptyOption:
        return is_none()

    def defined_option(self, *args: Any) -> DefinedOption:
        return is_defined_option(*args)

    def empty_option(self) -> EmptyOption:
        return is_empty_option()

    def left(self, *args: Any) -> EitherMatcher:
        return is_left(*args)

    def right(self, *args: Any) -> EitherMatcher:
        return is_right(*args)

    def success(self, *args: Any) -> SuccessMatcher:
        return is_success(*args)

    def failure(self, *args: Any) -> FailureMatcher:
        return is_failure(*args)

    def future(self, *args: Any) -> FutureMatcher:
        return is_future(*args)

    def future_matching(self, desc: str, predicate: Predicate) -> FutureMatcher:
        return is_future_matching(desc, predicate)

    def failed_future(self, *args: Any) -> FutureMatcher:
        return is_failed_future(*args)

    def failed_future_matching(self, desc: str, predicate: Callable[[BaseException], bool]) -> FutureMatcher:
        return is_failed_future_matching(desc, predicate)

    def lazy(self, *args: Any) -> LazyMatcher:
        return is_lazy(*args)

    def lazy_matching(self, desc: str, predicate: Predicate) -> LazyMatcher:
        return is_lazy_matching(desc, predicate)


class AM(metaclass=AMMeta):
    pass


__all__ = ('is_some', 'is_none', 'is_defined_option', 'is_empty_option', 'is_left', 'is_right', 'is_success',
           'is_failure', 'is_future', 'is_future_matching', 'is_failed_future', 'is_failed_future_matching', 'is_lazy',
           'is_lazy_matching', 'description_of', 'mismatch_of', 'AM')
