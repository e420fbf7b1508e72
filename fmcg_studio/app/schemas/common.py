import typing
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar('T')


class StandardResponse(BaseModel, Generic[T]):
    """Standard API response format"""
    status: str = "success"
    data: Optional[T] = None
    message: Optional[str] = None
    errors: Optional[dict] = None


class CamelModel(BaseModel):
    """
    Base for model-produced payloads.

    Accepts the camelCase keys the prompts ask for (and snake_case), turns a
    JSON null on a list field into an empty list and a null nested object into
    its defaults, so renderers never see None where a collection is expected.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, value, info):
        if value is not None or info.field_name is None:
            return value
        annotation = cls.model_fields[info.field_name].annotation
        if typing.get_origin(annotation) is list:
            return []
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            return {}
        return value
