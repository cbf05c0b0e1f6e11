"""
app/models/base.py
"""


from typing import Any
from pydantic import BaseModel, ConfigDict
from bson import ObjectId

# Simple PyObjectId for Pydantic v2
# We'll just use string type and handle ObjectId conversion in the database layer
PyObjectId = str

def stringify_object_id(value: Any) -> Any:
    """Convert ObjectId values coming out of Mongo to their hex string"""
    if isinstance(value, ObjectId):
        return str(value)
    return value

# Base Models
class BaseDocument(BaseModel):
    """Base model for documents read back from the store"""
    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )
