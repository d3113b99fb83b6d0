"""Invocation option schemas for cats3."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from cats3.core.exceptions import ConfigurationError


class CatOptions(BaseModel):
    """Options for one cats3 invocation."""

    model_config = ConfigDict(extra="forbid")

    bucket: str = Field(..., min_length=1, description="Bucket name")
    prefix_mode: bool = Field(
        default=False, description="Treat each argument as a prefix to expand"
    )
    delimiter: str = Field(default="/", description="Grouping delimiter for listing")
    dry_run: bool = Field(default=False, description="Enumerate keys only")
    quiet: bool = Field(default=False, description="Suppress informational logging")
    page_size: Optional[int] = Field(
        default=None, ge=1, le=1000, description="Keys per listing page"
    )


def parse_options(**values: Any) -> CatOptions:
    """Validate invocation options.

    Raises:
        ConfigurationError: If the bucket is missing or any option is invalid
    """
    if not values.get("bucket"):
        raise ConfigurationError("bucket name required")

    try:
        return CatOptions(**values)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid options: {e}") from e
