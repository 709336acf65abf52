from typing import Any

from hamcrest.core.description import Description
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from amino import Maybe, Just, Nothing
from amino.case import Case

from amino_hamcrest.timeout import TimeoutSetting, NoTimeout, Timeout


def type_name(tpe: type) -> str:
    name = tpe.__qualname__
    return name if tpe.__module__ == 'builtins' else f'{tpe.__module__}.{name}'


def exception_message(exc: BaseException) -> Maybe[str]:
    '''The message the exception was constructed with.
    `str` quotes the key of a `KeyError` and prefixes `OSError`s with their errno, so a single string argument is
    preferred.
    '''
    args = exc.args
    message = args[0] if len(args) == 1 and isinstance(args[0], str) else str(exc)
    return Maybe.optional(message or None)


class Describe:
    '''Writes the clauses of expectation and mismatch texts into a hamcrest `Description`.
    Clauses are comma-prefixed and must be emitted in the order
    container, timeout, outcome, value or exception, predicate or nested matcher.
    '''

    def __init__(self, sink: Description) -> None:
        self.sink = sink

    def text(self, text: str) -> 'Describe':
        self.sink.append_text(text)
        return self

    def value(self, value: Any) -> 'Describe':
        self.sink.append_description_of(value)
        return self

    def clause(self, text: str) -> 'Describe':
        return self.text(f', {text}')

    def expected(self, matcher: Matcher) -> 'Describe':
        matcher.describe_to(self.sink)
        return self

    def mismatch(self, matcher: Matcher, item: Any) -> 'Describe':
        matcher.describe_mismatch(item, self.sink)
        return self

    def nested_mismatch(self, matcher: Matcher, item: Any) -> 'Describe':
        return self.text(' not matching because ').mismatch(matcher, item)

    def container(self, name: str) -> 'Describe':
        article = 'an' if name[:1].lower() in 'aeiou' else 'a'
        return self.text(f'is {article} {name}')

    def timeout(self, setting: TimeoutSetting) -> 'Describe':
        return describe_timeout(self)(setting)

    def exception_type(self, exc: BaseException) -> 'Describe':
        return self.clause('with exception of type ').value(type_name(type(exc)))

    def exception(self, exc: BaseException) -> 'Describe':
        self.exception_type(exc)
        exception_message(exc) % (lambda a: self.clause('with message ').value(a))
        return self

    def failure(self, cause: Maybe[BaseException]) -> 'Describe':
        self.clause('that fails')
        return cause.map(self.exception).get_or(self.no_cause)

    def no_cause(self) -> 'Describe':
        return self.clause('but has no defined failure cause')

    def success(self, value: Any) -> 'Describe':
        return self.clause('that succeeds').clause('and yields value ').value(value)

    def timed_out(self) -> 'Describe':
        return self.clause('that fails by exceeding timeout')

    def invalid_timeout(self, amount: int) -> 'Describe':
        return self.text('invalid parameter timeoutAmount, must be positive, but is ').value(amount)


class describe_timeout(Case[TimeoutSetting, Describe], alg=TimeoutSetting):

    def __init__(self, desc: Describe) -> None:
        self.desc = desc

    def no_timeout(self, setting: NoTimeout) -> Describe:
        return self.desc

    def timeout(self, setting: Timeout) -> Describe:
        return (
            self.desc.clause(f'that completes within {setting.amount} {setting.unit.label}')
            if setting.valid else
            self.desc
        )


def description_of(matcher: Matcher) -> str:
    description = StringDescription()
    matcher.describe_to(description)
    return str(description)


def mismatch_of(matcher: Matcher, item: Any) -> Maybe[str]:
    description = StringDescription()
    return Nothing if matcher.matches(item, description) else Just(str(description))


__all__ = ('Describe', 'type_name', 'exception_message', 'description_of', 'mismatch_of')
