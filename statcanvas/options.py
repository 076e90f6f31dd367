"""Named options accepted by the statistics and regression functions.

Unsupported values never raise: they fall back to a documented default and
emit an :class:`UnsupportedOptionWarning` so the computation can continue.
"""

from __future__ import annotations

import logging
import warnings
from enum import Enum, IntEnum

logger = logging.getLogger(__name__)

Z95 = 1.96
Z99 = 2.58


class UnsupportedOptionWarning(UserWarning):
    """An option value was not recognised and a default was used instead."""


class ConfidenceLevel(IntEnum):
    P95 = 95
    P99 = 99


class RegressionMethod(str, Enum):
    SIMPLE = "simple"
    MODEL2 = "model2"


DEFAULT_CONFIDENCE = ConfidenceLevel.P95
DEFAULT_REGRESSION = RegressionMethod.MODEL2

_CRITICAL_VALUES = {
    ConfidenceLevel.P95: Z95,
    ConfidenceLevel.P99: Z99,
}


def _notify(message: str, stacklevel: int) -> None:
    logger.warning(message)
    warnings.warn(message, UnsupportedOptionWarning, stacklevel=stacklevel + 1)


def resolve_confidence_level(
    level, caller: str = "confidence_interval", stacklevel: int = 3
) -> ConfidenceLevel:
    """Return the supported confidence level for ``level``.

    Args:
        level: Requested level, normally ``95`` or ``99``. Numeric strings
            such as ``"99"`` are read as numbers first.
        caller: Name used in the diagnostic message.
        stacklevel: Passed through to :func:`warnings.warn` so the warning
            points at user code.

    Returns:
        ConfidenceLevel: ``level`` itself when supported, otherwise ``P95``.
    """
    try:
        if isinstance(level, str):
            level = float(level)
        return ConfidenceLevel(level)
    except (ValueError, TypeError):
        _notify(
            f"{caller}(): only 95% and 99% are supported, "
            f"defaulted to 95% confidence (got {level!r}).",
            stacklevel,
        )
        return DEFAULT_CONFIDENCE


def critical_value(level=DEFAULT_CONFIDENCE) -> float:
    """Two-sided z critical value for a 95% or 99% confidence level."""
    return _CRITICAL_VALUES[resolve_confidence_level(level, "critical_value")]


def resolve_regression_method(method, stacklevel: int = 3) -> RegressionMethod:
    """Map a regression method name onto :class:`RegressionMethod`.

    Unrecognised names fall back to ``model2``.
    """
    try:
        return RegressionMethod(method)
    except ValueError:
        _notify(
            f"line_of_best_fit(): unrecognized method {method!r}, "
            f"defaulted to '{DEFAULT_REGRESSION.value}'.",
            stacklevel,
        )
        return DEFAULT_REGRESSION
