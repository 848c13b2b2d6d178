# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ValueModel(BaseModel):
    """
    Base class for small value types in the domain layer.

    Value models behave like plain values:
    - Assignment: fields may be reassigned in place, and each assignment is
      type-checked against the field annotation
    - Copyability: independent copies via model_copy() or copy.copy(), and
      modified copies via with_changes()
    """
    model_config = {
        "validate_assignment": True,
        "extra": "forbid",  # Unknown fields are an error, not silently dropped
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = self.model_dump()

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__

        # model_validate skips any custom __init__ signature on the subclass
        return cast(T, cls.model_validate(current_data))
