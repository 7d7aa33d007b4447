"""Ready-made predicate builders over :func:`~fieldcheck.constraints.constrain`.

Every builder takes the validatable first and returns the registered
:class:`~fieldcheck.constraints.Constraint`, so messages and paths can still
be overridden::

    is_not_blank(v).otherwise("Name is required")
"""

from __future__ import annotations

from .boolean import is_false, is_not_false, is_not_true, is_true
from .containers import (
    has_no_duplicates,
    is_containing,
    is_containing_key,
    is_containing_value,
    is_not_containing,
    is_not_containing_key,
    is_not_containing_value,
)
from .generic import (
    is_equal_to,
    is_identical_to,
    is_instance_of,
    is_not_equal_to,
    is_not_identical_to,
    is_not_instance_of,
    is_not_null,
    is_null,
)
from .numeric import (
    has_fractional_count_equal_to,
    has_integral_count_equal_to,
    is_between,
    is_finite,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_infinite,
    is_lower_than,
    is_lower_than_or_equal_to,
    is_negative,
    is_negative_or_zero,
    is_not_nan,
    is_positive,
    is_positive_or_zero,
)
from .sized import (
    has_size_between,
    has_size_equal_to,
    has_size_greater_than,
    has_size_greater_than_or_equal_to,
    has_size_lower_than,
    has_size_lower_than_or_equal_to,
    has_size_not_equal_to,
    is_empty,
    is_not_empty,
)
from .temporal import (
    is_after,
    is_after_or_equal_to,
    is_before,
    is_before_or_equal_to,
    is_in_future,
    is_in_future_or_is_present,
    is_in_past,
    is_in_past_or_is_present,
)
from .text import (
    has_length_between,
    has_length_equal_to,
    has_length_greater_than,
    has_length_greater_than_or_equal_to,
    has_length_lower_than,
    has_length_lower_than_or_equal_to,
    has_length_not_equal_to,
    is_blank,
    is_ending_with,
    is_matching,
    is_not_blank,
    is_not_ending_with,
    is_not_matching,
    is_not_starting_with,
    is_starting_with,
)

__all__ = [
    # generic
    "is_null",
    "is_not_null",
    "is_equal_to",
    "is_not_equal_to",
    "is_identical_to",
    "is_not_identical_to",
    "is_instance_of",
    "is_not_instance_of",
    # boolean
    "is_true",
    "is_not_true",
    "is_false",
    "is_not_false",
    # numeric
    "is_not_nan",
    "is_finite",
    "is_infinite",
    "is_negative",
    "is_negative_or_zero",
    "is_positive",
    "is_positive_or_zero",
    "is_lower_than",
    "is_lower_than_or_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_between",
    "has_integral_count_equal_to",
    "has_fractional_count_equal_to",
    # text
    "is_blank",
    "is_not_blank",
    "has_length_equal_to",
    "has_length_not_equal_to",
    "has_length_lower_than",
    "has_length_lower_than_or_equal_to",
    "has_length_greater_than",
    "has_length_greater_than_or_equal_to",
    "has_length_between",
    "is_matching",
    "is_not_matching",
    "is_starting_with",
    "is_not_starting_with",
    "is_ending_with",
    "is_not_ending_with",
    # sized
    "is_empty",
    "is_not_empty",
    "has_size_equal_to",
    "has_size_not_equal_to",
    "has_size_lower_than",
    "has_size_lower_than_or_equal_to",
    "has_size_greater_than",
    "has_size_greater_than_or_equal_to",
    "has_size_between",
    # containers
    "is_containing",
    "is_not_containing",
    "has_no_duplicates",
    "is_containing_key",
    "is_not_containing_key",
    "is_containing_value",
    "is_not_containing_value",
    # temporal
    "is_in_past",
    "is_in_past_or_is_present",
    "is_in_future",
    "is_in_future_or_is_present",
    "is_before",
    "is_before_or_equal_to",
    "is_after",
    "is_after_or_equal_to",
]
