"""
Input validation and error handling for the plagiarism similarity engine.

This module provides the exception hierarchy raised by the engine, parameter
validation helpers used by the configuration layer, and the text sanitizer
that callers run on extracted document text before a check.
"""

import inspect
import re
from functools import wraps
from typing import Any, Mapping, Optional


MIN_TEXT_LENGTH = 10

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
_WHITESPACE = re.compile(r'\s+')


# Custom Exception Classes
class ValidationError(Exception):
    """Base class for validation errors."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class ParameterValidationError(ValidationError):
    """Exception raised for parameter validation errors."""
    pass


class EmptyReferenceCorpusError(ValidationError):
    """Raised when a check is requested without any reference document."""
    pass


class MalformedInputError(ValidationError):
    """Raised when the target or a reference is not usable plain text."""
    pass


class CheckCancelledError(RuntimeError):
    """Raised when the caller cancels a running plagiarism check."""

    def __init__(self, completed: int, total: int):
        self.completed = completed
        self.total = total
        super().__init__(f"Plagiarism check cancelled after {completed}/{total} references")


class ParameterValidator:
    """Parameter validation utilities."""

    @staticmethod
    def validate_positive_integer(value: Any, field: str, min_value: int = 1, max_value: Optional[int] = None) -> int:
        """Validate positive integer parameter."""
        if isinstance(value, float) and not value.is_integer():
            raise ParameterValidationError(
                f"{field} must be a whole number, got {value}",
                field=field,
                value=value
            )
        if isinstance(value, bool) or not isinstance(value, int):
            try:
                value = int(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be an integer, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return value

    @staticmethod
    def validate_positive_float(value: Any, field: str, min_value: float = 0.0, max_value: Optional[float] = None) -> float:
        """Validate positive float parameter."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            try:
                value = float(value)
            except (ValueError, TypeError):
                raise ParameterValidationError(
                    f"{field} must be a number, got {type(value).__name__}",
                    field=field,
                    value=value
                )

        if value < min_value:
            raise ParameterValidationError(
                f"{field} must be >= {min_value}, got {value}",
                field=field,
                value=value
            )

        if max_value is not None and value > max_value:
            raise ParameterValidationError(
                f"{field} must be <= {max_value}, got {value}",
                field=field,
                value=value
            )

        return float(value)

    @staticmethod
    def validate_probability(value: Any, field: str) -> float:
        """Validate a fraction in the closed interval [0, 1]."""
        return ParameterValidator.validate_positive_float(value, field, min_value=0.0, max_value=1.0)

    @staticmethod
    def validate_string(value: Any, field: str, min_length: int = 0, max_length: Optional[int] = None) -> str:
        """Validate string parameter."""
        if not isinstance(value, str):
            raise MalformedInputError(
                f"{field} must be a string, got {type(value).__name__}",
                field=field,
                value=value
            )

        if len(value) < min_length:
            raise MalformedInputError(
                f"{field} must be at least {min_length} characters, got {len(value)}",
                field=field,
                value=value
            )

        if max_length is not None and len(value) > max_length:
            raise MalformedInputError(
                f"{field} must be at most {max_length} characters, got {len(value)}",
                field=field,
                value=value
            )

        return value


class ReferenceValidator:
    """Validation of reference documents handed in by the caller."""

    @staticmethod
    def validate_reference(reference: Mapping[str, Any], index: int) -> Mapping[str, Any]:
        """
        Check that a reference mapping carries an ``id`` and string ``content``.

        Args:
            reference: Mapping with ``id`` and ``content`` keys
            index: Position of the reference in the corpus, for error messages

        Returns:
            The reference unchanged

        Raises:
            MalformedInputError: If a key is missing or content is not text
        """
        if not isinstance(reference, Mapping):
            raise MalformedInputError(
                f"Reference #{index} must be a mapping with 'id' and 'content', got {type(reference).__name__}",
                field="references",
                value=index
            )

        for key in ("id", "content"):
            if key not in reference:
                raise MalformedInputError(
                    f"Reference #{index} is missing required key '{key}'",
                    field=f"references[{index}].{key}",
                    value=None
                )

        ParameterValidator.validate_string(reference["content"], f"references[{index}].content")
        return reference


def sanitize_text(text: Any, name: str = "") -> str:
    """
    Validate and clean extracted document text before it enters the engine.

    Control characters are replaced by spaces and whitespace runs collapse to
    a single space.

    Raises:
        MalformedInputError: If text is not a string, is empty, or is shorter
            than ``MIN_TEXT_LENGTH`` characters after trimming
    """
    label = name or "text"
    if not isinstance(text, str) or not text:
        raise MalformedInputError(f"Content of {label} is not valid text", field=label, value=text)

    trimmed = text.strip()
    if not trimmed:
        raise MalformedInputError(f"{label} contains no readable text", field=label, value=text)

    if len(trimmed) < MIN_TEXT_LENGTH:
        raise MalformedInputError(
            f"{label} is too short to analyse (minimum {MIN_TEXT_LENGTH} characters)",
            field=label,
            value=len(trimmed)
        )

    sanitized = _CONTROL_CHARS.sub(' ', trimmed)
    return _WHITESPACE.sub(' ', sanitized).strip()


# Decorators for validation
def validate_inputs(**validators):
    """
    Decorator to validate function inputs.

    Args:
        **validators: Dict mapping parameter names to validation functions.
            Each validator returns the (possibly converted) value or raises.
    """
    def decorator(func):
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name, validator in validators.items():
                if param_name in bound_args.arguments:
                    value = bound_args.arguments[param_name]
                    try:
                        bound_args.arguments[param_name] = validator(value)
                    except ValidationError:
                        raise
                    except Exception as e:
                        raise ParameterValidationError(
                            f"Validation failed for {param_name}: {str(e)}",
                            field=param_name,
                            value=value
                        )

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator
