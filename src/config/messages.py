"""
Message catalogue for validation results.

Templates use %-style placeholders so they can be shared between result
messages and log records.
"""

# =============================================================================
# Strings
# =============================================================================
FIELD_REQUIRED = "Field '%s' is required"
FIELD_MUST_BE_STRING = "Field '%s' must be a string"
FIELD_CANNOT_BE_EMPTY = "Field '%s' cannot be empty"
FIELD_OPTIONAL_ABSENT = "Field '%s' is optional and was not provided, using null"
FIELD_OPTIONAL_BLANK = "Field '%s' is optional and blank, using null"
FIELD_TOO_SHORT = "Field '%s' must have at least %d characters"
FIELD_TOO_LONG = "Field '%s' must have at most %d characters"
FIELD_PATTERN_MISMATCH = "Field '%s' does not match the expected pattern"
PATTERN_REQUIRED = "Parameter 'pattern' is required to validate field '%s'"
PATTERN_INVALID = "Parameter 'pattern' for field '%s' is not a valid regular expression: %s"
LENGTH_BOUNDS_INVALID = "Parameter 'min_length' must be less than or equal to 'max_length' for field '%s'"

# =============================================================================
# Numbers
# =============================================================================
FIELD_MUST_BE_NUMBER = "Field '%s' must be a number"
FIELD_MUST_BE_INTEGER = "Field '%s' must be an integer"
FIELD_TOO_LARGE = "Field '%s' is too large"
FIELD_MUST_BE_POSITIVE = "Field '%s' must be a positive number"
FIELD_OUT_OF_RANGE = "Field '%s' must be between %s and %s"
RANGE_BOUNDS_REQUIRED = "Parameters 'min' and 'max' are required to validate the range of field '%s'"
MIN_MUST_BE_LESS_OR_EQUAL_MAX = "Parameter 'min' must be less than or equal to 'max'"
FIELD_BELOW_MIN = "Field '%s' must be greater than or equal to %s"
FIELD_ABOVE_MAX = "Field '%s' must be less than or equal to %s"
BOUND_REQUIRED = "Parameter '%s' is required to validate field '%s'"
FIELD_TOO_PRECISE = "Field '%s' must have at most %d decimal places"

# =============================================================================
# Pagination & sorting
# =============================================================================
PAGE_NOT_SPECIFIED = "Page not specified, using default %d"
PAGE_NEGATIVE = "Field 'page' cannot be negative"
PAGE_NEGATIVE_CORRECTED = "Negative page corrected to %d"
PAGE_INVALID_CORRECTED = "Invalid page '%s' replaced by default %d"
SIZE_NOT_SPECIFIED = "Size not specified, using default %d"
SIZE_MUST_BE_POSITIVE = "Field 'size' must be greater than zero"
SIZE_EXCEEDS_MAX = "Field 'size' must not exceed %d"
SIZE_INVALID_CORRECTED = "Invalid size '%s' replaced by default %d"
SIZE_CLAMPED = "Size %s exceeded the limit, clamped to %d"
SORT_FIELD_NOT_SPECIFIED = "Sort field not specified, using default '%s'"
SORT_FIELD_MUST_BE_STRING = "Sort field must be a string"
INVALID_SORT_FIELD = "Sort field '%s' is not valid. Valid fields: %s"
SORT_FIELD_CORRECTED = "Sort field '%s' is not valid, using default '%s'"
SORT_DIRECTION_NOT_SPECIFIED = "Sort direction not specified, using default '%s'"
SORT_DIRECTION_MUST_BE_STRING = "Sort direction must be a string"
INVALID_SORT_DIRECTION = "Sort direction must be 'ASC' or 'DESC'"
SORT_DIRECTION_CORRECTED = "Sort direction '%s' is not valid, using default '%s'"
PAGE_SPEC_EXPECTED = "Field '%s' must be a page specification"
PAGE_SPEC_PAGE_NEGATIVE = "Page of field '%s' cannot be negative"
PAGE_SPEC_SIZE_NOT_POSITIVE = "Page size of field '%s' must be positive"
PAGE_SPEC_SIZE_EXCEEDS_MAX = "Page size of field '%s' exceeds the maximum of %d"
PAGEABLE_VALIDATED = "Pagination parameters validated successfully"
PAGEABLE_NORMALIZED = "Pagination parameters normalized"

# =============================================================================
# Generic
# =============================================================================
FIELD_VALIDATED = "Field '%s' validated successfully"
HANDLER_ERROR = "Error during validation: %s"
UNHANDLED_KIND = "No handler available to process validation of kind: %s"
EMPTY_CHAIN = "No validation handler available"
KIND_NOT_SUPPORTED = "Validation kind not supported: %s"
