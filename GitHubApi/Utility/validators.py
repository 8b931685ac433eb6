"""
Argument precondition checks for resource client methods.

`validate_arguments` reads a method's type hints and rejects calls whose
arguments do not match them, before the method body (and so before any
request) runs.
"""
import functools
import inspect
from typing import Any, Callable, Union, get_args, get_origin, get_type_hints

from GitHubApi.Exception.GitHubError import ArgumentError


def _matches(value: Any, hint: Any) -> bool:
    if hint is Any:
        return True
    if hint is type(None):
        return value is None
    origin = get_origin(hint)
    if origin is Union:
        return any(_matches(value, arg) for arg in get_args(hint))
    if origin is not None:
        hint = origin
    if hint in (int, float):
        # bool is an int subclass but never a valid number here
        return isinstance(value, hint) and not isinstance(value, bool)
    return isinstance(value, hint)


def _describe(hint: Any) -> str:
    origin = get_origin(hint)
    if origin is Union:
        return " or ".join(_describe(arg) for arg in get_args(hint))
    if hint is type(None):
        return "None"
    return getattr(origin or hint, "__name__", str(hint))


def validate_arguments(func: Callable) -> Callable:
    signature = inspect.signature(func)
    positions = {
        name: index
        for index, name in enumerate((p for p in signature.parameters if p != "self"), 1)
    }
    hints = {}

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not hints:
            hints.update(get_type_hints(func))
        bound = signature.bind(*args, **kwargs)
        for name, value in bound.arguments.items():
            if name == "self":
                continue
            hint = hints.get(name)
            if hint is not None and not _matches(value, hint):
                raise ArgumentError(
                    f"Argument {positions[name]} ({name}) in {func.__qualname__}() was expecting "
                    f"{_describe(hint)}, {type(value).__name__} given"
                )
        return func(*args, **kwargs)

    return wrapper
