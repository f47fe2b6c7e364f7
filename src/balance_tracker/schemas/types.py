"""Annotated field types shared across schemas."""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator


def _number_to_str(value: Any) -> Any:
    """Accept JSON numbers (``101``) as their string form."""

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


StudentCode = Annotated[Optional[str], BeforeValidator(_number_to_str)]
StudentName = Annotated[Optional[str], BeforeValidator(_number_to_str)]
