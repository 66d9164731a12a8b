from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for all request/response bodies.

    Fields are snake_case in Python and camelCase on the wire. Input
    strings are trimmed, and unknown keys are ignored.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class MessageResponse(BaseModel):
    message: str
