import abc
from typing import TypeVar, Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.string_description import StringDescription

from amino_hamcrest.description import Describe, type_name

A = TypeVar('A')


class AminoMatcher(BaseMatcher[A]):
    '''Base for all matchers of this package.
    Subjects that aren't instances of `subject_type` are rejected before `matches_safely` is consulted.
    The mismatch text is produced by the same run that determines the result, so `describe_mismatch` repeats the
    check with the caller's description.
    The text is collected separately and only reaches the caller's description if the match fails.
    '''

    subject_type: type = object

    @abc.abstractmethod
    def matches_safely(self, item: A, desc: Describe) -> bool:
        ...

    @abc.abstractmethod
    def describe(self, desc: Describe) -> None:
        ...

    def diagnose(self, item: Any, desc: Describe) -> bool:
        if isinstance(item, self.subject_type):
            return self.matches_safely(item, desc)
        desc.text(f'was a {type_name(type(item))} (').value(item).text(')')
        return False

    def matches(self, item: Any, mismatch_description: Description=None) -> bool:
        scratch = StringDescription()
        result = self.diagnose(item, Describe(scratch))
        if not result and mismatch_description is not None:
            mismatch_description.append_text(str(scratch))
        return result

    def _matches(self, item: Any) -> bool:
        return self.matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self.matches(item, mismatch_description)

    def describe_to(self, description: Description) -> None:
        self.describe(Describe(description))


__all__ = ('AminoMatcher',)
