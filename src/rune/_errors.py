class ConfigurationError(ValueError):
    """Malformed arguments given to a constructor (missing bounds, a non-sequence to cycle over, ...).

    Returned inside `Err`, never raised by rune itself.
    """


class MissingFunctionError(TypeError):
    """A required function argument was not supplied.

    Returned inside `Err`, never raised by rune itself.
    """
