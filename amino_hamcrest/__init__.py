from amino_hamcrest.logging import envvar_file_logging
from amino_hamcrest.timeout import TimeUnit
from amino_hamcrest.matchers import (is_some, is_none, is_defined_option, is_empty_option, is_left, is_right,
                                     is_success, is_failure, is_future, is_future_matching, is_failed_future,
                                     is_failed_future_matching, is_lazy, is_lazy_matching, description_of, mismatch_of,
                                     AM)

envvar_file_logging()

__all__ = ('is_some', 'is_none', 'is_defined_option', 'is_empty_option', 'is_left', 'is_right', 'is_success',
           'is_failure', 'is_future', 'is_future_matching', 'is_failed_future', 'is_failed_future_matching', 'is_lazy',
           'is_lazy_matching', 'description_of', 'mismatch_of', 'AM', 'TimeUnit')
