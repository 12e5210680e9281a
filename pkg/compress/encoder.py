"""JSON encoder for codec payloads.

Extends the standard encoder to handle:
1. pydantic models (dumped by alias)
2. dataclass instances
3. datetime/date objects
4. UUID and Decimal values
"""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel


class PayloadEncoder(json.JSONEncoder):
    """JSON encoder for records carried inside compressed payloads.

    Example:
        >>> json.dumps({"at": date(2024, 1, 2)}, cls=PayloadEncoder)
        '{"at": "2024-01-02"}'
    """

    def __init__(self, **kwargs):
        # NaN/Infinity have no JSON representation
        kwargs.setdefault("allow_nan", False)
        kwargs.setdefault("ensure_ascii", False)
        kwargs.setdefault("separators", (",", ":"))
        super().__init__(**kwargs)

    def default(self, obj: Any) -> Any:
        """Convert non-serializable objects to JSON-compatible types.

        Raises:
            TypeError: If object type is not supported.
        """
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", by_alias=True)

        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)

        if isinstance(obj, (datetime, date)):
            return obj.isoformat()

        if isinstance(obj, UUID):
            return str(obj)

        if isinstance(obj, Decimal):
            return float(obj)

        return super().default(obj)


__all__ = ["PayloadEncoder"]
