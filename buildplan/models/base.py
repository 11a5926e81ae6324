"""Base model for all buildplan Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all buildplan models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BuildPlanBaseModel(BaseModel):
    """Base model class for all buildplan Pydantic models.

    Unknown fields are ignored so that newer producers (test binaries, nextest)
    can add fields without breaking ingestion.
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, mode="json")
