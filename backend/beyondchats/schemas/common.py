"""
Shared schema base: snake_case in Python, camelCase on the wire (the web client's field names).
Requests accept either spelling.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class SuccessResponse(CamelModel):
    success: bool = True
