"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from typing import Type, TypeVar, Any

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """Base schema with common functionality for all schemas"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True
    )

    @classmethod
    def from_response(cls: Type[T], data: Any) -> T:
        """Create a schema instance from a decoded API response"""
        return cls.model_validate(data)
