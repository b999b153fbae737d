"""Argument validation for the public numeric entry points"""

__all__ = ['validate_inputs']

import functools

from pydantic import ConfigDict, ValidationError, validate_call

from geomeasure.exceptions import TypeMismatch

# Strict: no str -> float coercion, no NaN/inf, Points checked by isinstance
_STRICT_CONFIG = ConfigDict(
    arbitrary_types_allowed=True,
    strict=True,
    allow_inf_nan=False,
)


def _describe(func_name: str, exc: ValidationError) -> str:
    problems = '; '.join(
        f"{'.'.join(str(x) for x in err['loc']) or 'argument'}: {err['msg']}"
        for err in exc.errors()
    )
    return f'Invalid arguments to {func_name}() - {problems}'


def validate_inputs(func):
    """
    Decorator that validates a function's arguments against its annotations
    before the body runs, raising TypeMismatch on the first bad call.

    Args:
        func:
            The function to wrap

    Returns:
        The wrapped function
    """
    validated = validate_call(config=_STRICT_CONFIG)(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return validated(*args, **kwargs)
        except ValidationError as exc:
            raise TypeMismatch(_describe(func.__name__, exc)) from exc

    return wrapper
