import abc
from typing import Any, Callable, Type, Tuple

from hamcrest.core.matcher import Matcher

from amino import ADT, Maybe

from amino_hamcrest.description import exception_message

Predicate = Callable[[Any], bool]


class ValueExpectation(ADT['ValueExpectation']):

    @abc.abstractmethod
    def accepts(self, value: Any) -> bool:
        ...


class AnyValue(ValueExpectation):

    def accepts(self, value: Any) -> bool:
        return True


class EqualValue(ValueExpectation):

    def __init__(self, value: Any) -> None:
        self.value = value

    def accepts(self, value: Any) -> bool:
        return self.value == value


class MatchingValue(ValueExpectation):

    def __init__(self, matcher: Matcher) -> None:
        self.matcher = matcher

    def accepts(self, value: Any) -> bool:
        return self.matcher.matches(value)


class SatisfyingValue(ValueExpectation):

    def __init__(self, desc: str, predicate: Predicate) -> None:
        self.desc = desc
        self.predicate = predicate

    def accepts(self, value: Any) -> bool:
        return bool(self.predicate(value))


class CauseExpectation(ADT['CauseExpectation']):

    @abc.abstractmethod
    def accepts(self, cause: BaseException) -> bool:
        ...


class AnyCause(CauseExpectation):

    def accepts(self, cause: BaseException) -> bool:
        return True


class CauseOfType(CauseExpectation):

    @staticmethod
    def cons(tpe: Type[BaseException], message: str=None) -> 'CauseOfType':
        return CauseOfType(tpe, Maybe.optional(message))

    def __init__(self, tpe: Type[BaseException], message: Maybe[str]) -> None:
        self.tpe = tpe
        self.message = message

    def accepts(self, cause: BaseException) -> bool:
        return (
            isinstance(cause, self.tpe) and
            self.message.map(lambda a: self.has_message(cause, a)).get_or_strict(True)
        )

    def has_message(self, cause: BaseException, message: str) -> bool:
        return exception_message(cause).contains(message)


class MatchingCause(CauseExpectation):

    def __init__(self, matcher: Matcher) -> None:
        self.matcher = matcher

    def accepts(self, cause: BaseException) -> bool:
        return self.matcher.matches(cause)


class SatisfyingCause(CauseExpectation):

    def __init__(self, desc: str, predicate: Predicate) -> None:
        self.desc = desc
        self.predicate = predicate

    def accepts(self, cause: BaseException) -> bool:
        return bool(self.predicate(cause))


class OutcomeExpectation(ADT['OutcomeExpectation']):
    pass


class Succeeds(OutcomeExpectation):

    def __init__(self, value: ValueExpectation) -> None:
        self.value = value


class Fails(OutcomeExpectation):

    def __init__(self, cause: CauseExpectation) -> None:
        self.cause = cause


def is_exception_type(a: Any) -> bool:
    return isinstance(a, type) and issubclass(a, BaseException)


def value_expectation(args: Tuple[Any, ...]) -> ValueExpectation:
    if len(args) == 0:
        return AnyValue()
    elif len(args) == 1:
        value = args[0]
        return MatchingValue(value) if isinstance(value, Matcher) else EqualValue(value)
    elif len(args) == 2:
        return SatisfyingValue(*args)
    raise TypeError(f'expected a value, a matcher or a description and a predicate, got {args}')


def cause_expectation(args: Tuple[Any, ...]) -> CauseExpectation:
    if len(args) == 0:
        return AnyCause()
    elif len(args) == 1:
        cause = args[0]
        if is_exception_type(cause):
            return CauseOfType.cons(cause)
        elif isinstance(cause, Matcher):
            return MatchingCause(cause)
    elif len(args) == 2:
        return SatisfyingCause(*args)
    raise TypeError(f'expected an exception class, a matcher or a description and a predicate, got {args}')


__all__ = ('ValueExpectation', 'AnyValue', 'EqualValue', 'MatchingValue', 'SatisfyingValue', 'CauseExpectation',
           'AnyCause', 'CauseOfType', 'MatchingCause', 'SatisfyingCause', 'OutcomeExpectation', 'Succeeds', 'Fails',
           'value_expectation', 'cause_expectation', 'is_exception_type', 'Predicate')
