"""ConvKit Exception Hierarchy.

Every error raised by ConvKit derives from ``ConvKitException`` and carries a
machine-readable error code plus a context dictionary, so callers can log or
serialize failures without parsing messages.

Exception Hierarchy:
    ConvKitException (base)
    ├── ConversionException
    │   ├── ConversionUnsupported
    │   └── UnknownQuantity
    └── ConfigurationError

Example:
    >>> from convkit.exceptions import ConversionUnsupported
    >>> raise ConversionUnsupported("m", "parsec", quantity="length")
    Traceback (most recent call last):
        ...
    convkit.exceptions.ConversionUnsupported: Conversion from "m" to "parsec" is not supported.
"""

from typing import Any, Dict, Optional
from datetime import datetime
import json
import re


# ==============================================================================
# Base Exception
# ==============================================================================

class ConvKitException(Exception):
    """Base exception for all ConvKit errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier (e.g., "CK_UNIT_CONVERSION_UNSUPPORTED")
        context: Dictionary with error-specific details
        timestamp: When the error occurred
    """

    ERROR_PREFIX = "CK"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception with context.

        Args:
            message: Human-readable error message
            error_code: Unique error identifier (auto-generated if not provided)
            context: Dictionary with error-specific details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.timestamp = datetime.now()

    def _generate_error_code(self) -> str:
        """Build the error code from the prefix and the class name.

        Returns:
            Error code like "CK_UNIT_CONVERSION_UNSUPPORTED"
        """
        error_type = re.sub(r'(?<!^)(?=[A-Z])', '_', self.__class__.__name__).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}')"
        )


# ==============================================================================
# Conversion Exceptions
# ==============================================================================

class ConversionException(ConvKitException):
    """Base exception for unit conversion errors."""
    ERROR_PREFIX = "CK_UNIT"


class ConversionUnsupported(ConversionException):
    """No rate or function exists for the requested unit pair.

    Raised for pairs missing from a quantity's table, for identical units
    (tables never map a unit to itself) and for identifiers outside the
    quantity's unit enumeration.

    Example:
        >>> raise ConversionUnsupported("C", "C", quantity="temperature")
    """

    MESSAGE_TEMPLATE = 'Conversion from "{from_unit}" to "{to_unit}" is not supported.'

    def __init__(
        self,
        from_unit: str,
        to_unit: str,
        quantity: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize unsupported conversion error.

        Args:
            from_unit: Source unit identifier as given by the caller
            to_unit: Target unit identifier as given by the caller
            quantity: Quantity whose table was consulted
            context: Extra error context
        """
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.quantity = quantity
        context = dict(context or {})
        context["from_unit"] = from_unit
        context["to_unit"] = to_unit
        if quantity:
            context["quantity"] = quantity
        message = self.MESSAGE_TEMPLATE.format(from_unit=from_unit, to_unit=to_unit)
        super().__init__(message, context=context)


class UnknownQuantity(ConversionException):
    """The requested quantity is not registered with the converter."""

    def __init__(
        self,
        quantity: str,
        context: Optional[Dict[str, Any]] = None,
        available: Optional[list] = None,
    ):
        self.quantity = quantity
        context = dict(context or {})
        context["quantity"] = quantity
        if available:
            context["available_quantities"] = available
        super().__init__(f"Unknown quantity: {quantity}", context=context)


# ==============================================================================
# Configuration Exceptions
# ==============================================================================

class ConfigurationError(ConvKitException):
    """Configuration values are invalid.

    Example:
        >>> raise ConfigurationError(
        ...     message="Invalid configuration override",
        ...     context={"errors": ["percentage_decimals: must be >= 0"]}
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        context = dict(context or {})
        if cause:
            context["cause"] = str(cause)
            context["cause_type"] = type(cause).__name__
        super().__init__(message, context=context)


# ==============================================================================
# Exception Utilities
# ==============================================================================

def format_exception_chain(exc: Exception) -> str:
    """Format exception chain for logging/display.

    Args:
        exc: Exception to format

    Returns:
        Formatted string with full exception chain
    """
    lines = []
    current = exc

    while current is not None:
        if isinstance(current, ConvKitException):
            lines.append(f"[{current.error_code}] {current}")
            lines.append(f"  Context: {current.context}")
        else:
            lines.append(f"{type(current).__name__}: {current}")

        current = getattr(current, "__cause__", None)

    return "\n".join(lines)
