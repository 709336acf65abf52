import time
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError
from typing import Any

from hamcrest import equal_to, instance_of
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from kallikrein import k, Expectation
from kallikrein.matchers import equal
from kallikrein.matchers.maybe import be_just, be_nothing

from amino.test.spec import SpecBase

from amino_hamcrest import (is_future, is_future_matching, is_failed_future, is_failed_future_matching, TimeUnit,
                            description_of, mismatch_of)

executor = ThreadPoolExecutor(thread_name_prefix='future_spec')


def sleeping(seconds: float, value: Any) -> Any:
    time.sleep(seconds)
    return value


def succeeded(value: Any) -> Future:
    future = Future()
    future.set_result(value)
    return future


def failed(error: BaseException) -> Future:
    future = Future()
    future.set_exception(error)
    return future


def raise_error(error: BaseException) -> Any:
    raise error


def cancelled() -> Future:
    future = Future()
    future.cancel()
    return future


def illegal_state() -> Future:
    return failed(RuntimeError('Illegal State'))


def written(matcher: Matcher, subject: Any) -> str:
    sink = StringDescription()
    matcher.matches(subject, sink)
    return str(sink)


def even(a: int) -> bool:
    return a % 2 == 0


def is_value_error(a: BaseException) -> bool:
    return isinstance(a, ValueError)


illegal_state_failure = "is a Future, that fails, with exception of type 'RuntimeError', with message 'Illegal State'"


class FutureSpec(SpecBase):
    '''
    complete within the timeout $within_timeout
    exceed the timeout $exceed_timeout
    failure with an expected message $message
    the message of a single argument exception $constructor_message
    reject a non-positive timeout $invalid_timeout
    describe the timeout $describe_timeout
    failure where a success was expected $failure_instead_of_success
    failure without a cause $no_cause
    success value $success_value
    success value matching an inner matcher $success_matcher
    success value satisfying a predicate $success_predicate
    success where a failure was expected $success_instead_of_failure
    failure of a given type $failure_type
    failure matching an inner matcher $failure_matcher
    failure satisfying a predicate $failure_predicate
    a `TimeoutError` cause counts as a timeout $timeout_cause
    `with_message` and `with_timeout` commute $commute
    a successful match writes nothing into the mismatch description $silent_success
    descriptions $descriptions
    '''

    def within_timeout(self) -> Expectation:
        return k(mismatch_of(is_future('A').with_timeout(1, TimeUnit.SECONDS), executor.submit(lambda: 'A'))).must(
            be_nothing)

    def exceed_timeout(self) -> Expectation:
        return (
            k(mismatch_of(is_future('A').with_timeout(1, TimeUnit.SECONDS), executor.submit(sleeping, 1.5, 'A')))
            .must(be_just('is a Future, that fails by exceeding timeout')) &
            k(mismatch_of(is_failed_future().with_timeout(100, TimeUnit.MILLISECONDS),
                          executor.submit(sleeping, 0.5, 'A')))
            .must(be_just('is a Future, that fails by exceeding timeout'))
        )

    def message(self) -> Expectation:
        matcher = is_failed_future(RuntimeError).with_message('Illegal State').with_timeout(1, TimeUnit.SECONDS)
        other = is_failed_future(RuntimeError).with_message('Something else').with_timeout(1, TimeUnit.SECONDS)
        return (
            k(mismatch_of(matcher, executor.submit(raise_error, RuntimeError('Illegal State')))).must(be_nothing) &
            k(mismatch_of(other, illegal_state())).must(be_just(illegal_state_failure)) &
            k(mismatch_of(other, failed(RuntimeError())))
            .must(be_just("is a Future, that fails, with exception of type 'RuntimeError'"))
        )

    def constructor_message(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future(KeyError).with_message('k'), failed(KeyError('k')))).must(be_nothing) &
            k(mismatch_of(is_failed_future(OSError).with_message('boom'), failed(OSError('boom')))).must(be_nothing) &
            k(mismatch_of(is_failed_future(KeyError).with_message('j'), failed(KeyError('k'))))
            .must(be_just("is a Future, that fails, with exception of type 'KeyError', with message 'k'"))
        )

    def invalid_timeout(self) -> Expectation:
        return (
            k(mismatch_of(is_future().with_timeout(-1, TimeUnit.SECONDS), succeeded(5)))
            .must(be_just('invalid parameter timeoutAmount, must be positive, but is <-1>')) &
            k(mismatch_of(is_failed_future(RuntimeError).with_timeout(0), illegal_state()))
            .must(be_just('invalid parameter timeoutAmount, must be positive, but is <0>')) &
            k(mismatch_of(is_future(5).with_timeout(-1, TimeUnit.SECONDS), Future()))
            .must(be_just('invalid parameter timeoutAmount, must be positive, but is <-1>')) &
            k(mismatch_of(is_failed_future(RuntimeError).with_message('x').with_timeout(0), Future()))
            .must(be_just('invalid parameter timeoutAmount, must be positive, but is <0>'))
        )

    def describe_timeout(self) -> Expectation:
        return (
            k(description_of(is_future('F').with_timeout(5, TimeUnit.SECONDS)))
            .must(equal("is a Future, that completes within 5 seconds, that succeeds, with value 'F'")) &
            k(description_of(is_failed_future().with_timeout(500, TimeUnit.MILLISECONDS)))
            .must(equal('is a Future, that completes within 500 milliseconds, that fails')) &
            k(description_of(is_future().with_timeout(-1)))
            .must(equal('is a Future, that succeeds'))
        )

    def failure_instead_of_success(self) -> Expectation:
        return (
            k(mismatch_of(is_future(), illegal_state())).must(be_just(illegal_state_failure)) &
            k(mismatch_of(is_future(5), failed(ValueError())))
            .must(be_just("is a Future, that fails, with exception of type 'ValueError'"))
        )

    def no_cause(self) -> Expectation:
        return (
            k(mismatch_of(is_future(), cancelled()))
            .must(be_just('is a Future, that fails, but has no defined failure cause')) &
            k(mismatch_of(is_failed_future(), cancelled())).must(be_nothing) &
            k(mismatch_of(is_failed_future(RuntimeError), cancelled()))
            .must(be_just('is a Future, that fails, but has no defined failure cause')) &
            k(mismatch_of(is_failed_future(instance_of(RuntimeError)), cancelled()))
            .must(be_just('is a Future, that fails, but has no defined failure cause')) &
            k(mismatch_of(is_failed_future_matching('value error', is_value_error), cancelled()))
            .must(be_just('is a Future, that fails, but has no defined failure cause'))
        )

    def success_value(self) -> Expectation:
        return (
            k(mismatch_of(is_future(5), succeeded(5))).must(be_nothing) &
            k(mismatch_of(is_future(5), succeeded(6))).must(be_just('is a Future, that succeeds, with value <6>'))
        )

    def success_matcher(self) -> Expectation:
        return (
            k(mismatch_of(is_future(equal_to(5)), succeeded(5))).must(be_nothing) &
            k(mismatch_of(is_future(equal_to(5)), succeeded(6)))
            .must(be_just('is a Future, that succeeds, with value <6> not matching because was <6>'))
        )

    def success_predicate(self) -> Expectation:
        return (
            k(mismatch_of(is_future_matching('even', even), succeeded(4))).must(be_nothing) &
            k(mismatch_of(is_future_matching('even', even), succeeded(5)))
            .must(be_just("is a Future, that succeeds, with value <5> not satisfying 'even'"))
        )

    def success_instead_of_failure(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future(), succeeded(5)))
            .must(be_just('is a Future, that succeeds, and yields value <5>')) &
            k(mismatch_of(is_failed_future(RuntimeError), succeeded(5)))
            .must(be_just('is a Future, that succeeds, and yields value <5>')) &
            k(mismatch_of(is_failed_future_matching('value error', is_value_error), succeeded('A')))
            .must(be_just("is a Future, that succeeds, and yields value 'A'"))
        )

    def failure_type(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future(RuntimeError), illegal_state())).must(be_nothing) &
            k(mismatch_of(is_failed_future(Exception), illegal_state())).must(be_nothing) &
            k(mismatch_of(is_failed_future(ValueError), illegal_state())).must(be_just(illegal_state_failure))
        )

    def failure_matcher(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future(instance_of(RuntimeError)), illegal_state())).must(be_nothing) &
            k(mismatch_of(is_failed_future(instance_of(ValueError)), illegal_state()))
            .must(be_just('is a Future, that fails, because was <Illegal State>'))
        )

    def failure_predicate(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future_matching('value error', is_value_error), failed(ValueError())))
            .must(be_nothing) &
            k(mismatch_of(is_failed_future_matching('value error', is_value_error), illegal_state()))
            .must(be_just("is a Future, that fails, with exception not matching predicate 'value error'"))
        )

    def timeout_cause(self) -> Expectation:
        return (
            k(mismatch_of(is_failed_future(), failed(TimeoutError())))
            .must(be_just('is a Future, that fails by exceeding timeout')) &
            k(mismatch_of(is_failed_future(TimeoutError).with_timeout(1), failed(TimeoutError())))
            .must(be_just('is a Future, that fails by exceeding timeout'))
        )

    def commute(self) -> Expectation:
        first = is_failed_future(RuntimeError).with_message('Illegal State').with_timeout(1, TimeUnit.SECONDS)
        second = is_failed_future(RuntimeError).with_timeout(1, TimeUnit.SECONDS).with_message('Illegal State')
        expected = ("is a Future, that completes within 1 seconds, that fails, with exception of type 'RuntimeError'"
                    " and message 'Illegal State'")
        return (
            k(description_of(first)).must(equal(expected)) &
            k(description_of(second)).must(equal(expected)) &
            k(mismatch_of(second, illegal_state())).must(be_nothing)
        )

    def silent_success(self) -> Expectation:
        return (
            k(written(is_future(5), succeeded(5))).must(equal('')) &
            k(written(is_failed_future(RuntimeError), failed(RuntimeError('x')))).must(equal('')) &
            k(written(is_failed_future(RuntimeError).with_message('x'), failed(RuntimeError('x')))).must(equal('')) &
            k(written(is_failed_future(RuntimeError), failed(ValueError('x'))))
            .must(equal("is a Future, that fails, with exception of type 'ValueError', with message 'x'"))
        )

    def descriptions(self) -> Expectation:
        return (
            k(description_of(is_future())).must(equal('is a Future, that succeeds')) &
            k(description_of(is_future(equal_to(5))))
            .must(equal('is a Future, that succeeds, with value matching <5>')) &
            k(description_of(is_future_matching('even', even)))
            .must(equal("is a Future, that succeeds, with value matching predicate 'even'")) &
            k(description_of(is_failed_future(ValueError)))
            .must(equal("is a Future, that fails, with exception of type 'ValueError'")) &
            k(description_of(is_failed_future(instance_of(ValueError))))
            .must(equal('is a Future, that fails, with exception matching an instance of ValueError')) &
            k(description_of(is_failed_future_matching('value error', is_value_error)))
            .must(equal("is a Future, that fails, with exception matching predicate 'value error'"))
        )


__all__ = ('FutureSpec',)
