from typing import ClassVar, Tuple

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """Stored field names are camelCase; Python attributes are snake_case."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True)


class Patch(Document):
    """Partial update. Only explicitly set fields are written.

    Fields named in ``not_null`` may be changed but never cleared: an
    explicit null for one of them is rejected.
    """

    not_null: ClassVar[Tuple[str, ...]] = ()

    class Config:
        extra = "forbid"

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.not_null:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)
