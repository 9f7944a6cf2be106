"""
Numeric attributes and their value policies.

Policies
- Free: any integer (ColSpan, RowSpan, Cols, Rows, Start, Width, Maxlength, Minlength)
  or float (High, Low).
- Hard precondition: Span must be > 0; FontSize given as an int must lie in [1, 7].
  Violations raise OutOfDomainError inside validation, surfaced as ValidationError.
- Clamp: Size stores max(1, n).
- String-backed: Height, FrameBorder, MarginHeight, MarginWidth, Min, Max and Step keep
  their wire string; numbers are formatted on construction.

Notes
- No cross-field checks: `Low(5)` with `High(1)` is accepted.
- Min and Max share the date/time builders used by date-like inputs.

Examples
--------
>>> from htmltypes.attributes.numeric import Max, Size, Width
>>> Size(0).value
1
>>> Width(320).pair()
('width', '320')
>>> Max.week(2024, 3).value
'2024-W03'
"""

from __future__ import annotations

import datetime as dt
import logging
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import field_validator

from htmltypes.core.base import (
    GenericAttribute,
    IntegerAttribute,
    NumberAttribute,
    StringAttribute,
    format_value,
    preset,
    require,
)

__all__ = [
    "Cols",
    "ColSpan",
    "DateFormat",
    "FontSize",
    "FrameBorder",
    "Height",
    "High",
    "Low",
    "MarginHeight",
    "MarginWidth",
    "Max",
    "Maxlength",
    "Min",
    "Minlength",
    "Rows",
    "RowSpan",
    "Size",
    "Span",
    "Start",
    "Step",
    "Value",
    "Width",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ============================================================================
# Integers
# ============================================================================


class ColSpan(IntegerAttribute):
    """Number of columns a table cell spans."""

    attribute = "colspan"


class RowSpan(IntegerAttribute):
    """Number of rows a table cell spans."""

    attribute = "rowspan"


class Cols(IntegerAttribute):
    """Visible width of a textarea, in average character widths."""

    attribute = "cols"


class Rows(IntegerAttribute):
    attribute = "rows"


class Start(IntegerAttribute):
    """First number of an ordered list."""

    attribute = "start"


class Width(IntegerAttribute):
    attribute = "width"


class Maxlength(IntegerAttribute):
    attribute = "maxlength"


class Minlength(IntegerAttribute):
    attribute = "minlength"


class Span(IntegerAttribute):
    """
    Number of consecutive columns a col/colgroup spans.

    Raises:
        ValidationError: If the value is not > 0 (carries an OutOfDomainError).
    """

    attribute = "span"

    @field_validator("value")
    @classmethod
    def _positive(cls, v: int) -> int:
        require(v > 0, f"span must be > 0 (got {v})")
        return v


class Size(IntegerAttribute):
    """
    Visible width of an input (characters) or number of visible select options.

    Values below 1 are clamped to 1.
    """

    attribute = "size"

    standard_text_field = preset(30)
    small_text_field = preset(10)
    large_text_field = preset(50)
    standard_listbox = preset(5)

    @field_validator("value")
    @classmethod
    def _clamp(cls, v: int) -> int:
        if v < 1:
            logger.debug("size: clamping %d to 1", v)
            return 1
        return v


# ============================================================================
# Floats
# ============================================================================


class High(NumberAttribute):
    """Lower bound of the high end of a meter's range."""

    attribute = "high"


class Low(NumberAttribute):
    """Upper bound of the low end of a meter's range."""

    attribute = "low"


# ============================================================================
# String-backed numbers
# ============================================================================


class _NumericString(StringAttribute):
    """String-valued attribute that also accepts numbers, formatted on construction."""

    @field_validator("value", mode="before")
    @classmethod
    def _format_number(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError(f"{cls.attribute} expects a number or string, got a bool")
        if isinstance(v, (int, float)):
            return format_value(v)
        return v


class Height(_NumericString):
    attribute = "height"


class FrameBorder(_NumericString):
    attribute = "frameborder"


class MarginHeight(_NumericString):
    attribute = "marginheight"


class MarginWidth(_NumericString):
    attribute = "marginwidth"


class FontSize(StringAttribute):
    """
    Font size of the obsolete font/basefont elements.

    An int must lie in [1, 7]; strings pass through, and `relative(n)` builds the
    signed form ("+2", "-1").
    """

    attribute = "size"

    @field_validator("value", mode="before")
    @classmethod
    def _absolute(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("size expects an int in [1, 7] or a string, got a bool")
        if isinstance(v, int):
            require(1 <= v <= 7, f"font size must be in [1, 7] (got {v})")
            return str(v)
        return v

    @classmethod
    def relative(cls, n: int) -> FontSize:
        """Size relative to the base font size: "+n" for positive n, "n" otherwise."""
        return cls(f"+{n}" if n > 0 else str(n))


class DateFormat(Enum):
    """Wire formats accepted by date-like inputs."""

    FULL_DATE = "full_date"
    MONTH = "month"
    WEEK = "week"
    TIME = "time"
    DATE_TIME_LOCAL = "date_time_local"


class _DateBound(_NumericString):
    """Shared builders for min/max of number and date-like inputs."""

    @classmethod
    def date(cls, year: int, month: int, day: int):
        """Date input bound, "YYYY-MM-DD"."""
        return cls(f"{year:04d}-{month:02d}-{day:02d}")

    @classmethod
    def month(cls, year: int, month: int):
        """Month input bound, "YYYY-MM"."""
        return cls(f"{year:04d}-{month:02d}")

    @classmethod
    def week(cls, year: int, week: int):
        """Week input bound, "YYYY-Www"."""
        return cls(f"{year:04d}-W{week:02d}")

    @classmethod
    def time(cls, hour: int, minute: int):
        """Time input bound, "HH:MM"."""
        return cls(f"{hour:02d}:{minute:02d}")

    @classmethod
    def date_time_local(cls, year: int, month: int, day: int, hour: int, minute: int):
        """Datetime-local input bound, "YYYY-MM-DDTHH:MM"."""
        return cls(f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}")

    @classmethod
    def from_date(cls, when: dt.date, format: DateFormat = DateFormat.FULL_DATE):
        """
        Format a date or datetime for a date-like input.

        Args:
            when (datetime.date | datetime.datetime): Point in time. A plain date has
                no time of day, so TIME and DATE_TIME_LOCAL read it as midnight.
            format (DateFormat): Target wire format. WEEK uses the ISO-8601 week year.

        Returns:
            Min | Max: Bound of the calling type.
        """
        hour = getattr(when, "hour", 0)
        minute = getattr(when, "minute", 0)
        if format is DateFormat.FULL_DATE:
            return cls.date(when.year, when.month, when.day)
        if format is DateFormat.MONTH:
            return cls.month(when.year, when.month)
        if format is DateFormat.WEEK:
            iso = when.isocalendar()
            return cls.week(iso.year, iso.week)
        if format is DateFormat.TIME:
            return cls.time(hour, minute)
        return cls.date_time_local(when.year, when.month, when.day, hour, minute)


class Min(_DateBound):
    """Lowest acceptable value of a number, range or date-like input."""

    attribute = "min"

    zero = preset(0)


class Max(_DateBound):
    """Highest acceptable value of a number, range or date-like input."""

    attribute = "max"


class Step(_NumericString):
    """Granularity of a number, range or date-like input ("any" disables stepping)."""

    attribute = "step"

    any = preset("any")


# ============================================================================
# Generic
# ============================================================================


class Value(GenericAttribute[T], Generic[T]):
    """
    The `value` attribute; its payload type depends on the host element.

    Examples:
        >>> Value[int](3).pair()
        ('value', '3')
        >>> Value("hello").string_value
        'hello'
    """

    attribute = "value"
