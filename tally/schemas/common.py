"""
Shared field types for schemas.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer


# Decimals stay exact inside the engine and go out as JSON numbers
Amount = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]
Percent = Annotated[Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")]

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
