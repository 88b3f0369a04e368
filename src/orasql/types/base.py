"""Base model class for all orasql models with serialization support."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class OraSQLBaseModel(BaseModel):
    """Base model for all orasql models with built-in serialization.

    Provides common functionality for all orasql models including:
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Enum members are replaced with their values so the result is
        JSON serializable.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        data = self.model_dump(by_alias=False, exclude_none=True)

        def convert_nested(obj):
            if isinstance(obj, dict):
                return {k: convert_nested(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert_nested(item) for item in obj]
            elif isinstance(obj, Enum):
                return obj.value
            return obj

        return convert_nested(data)
