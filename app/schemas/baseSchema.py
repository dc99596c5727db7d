from typing import ClassVar, FrozenSet
from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialising field names as camelCase for the frontend."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PartialUpdateModel(CamelModel):
    """
    Base for PATCH payloads.

    Omitted fields stay out of ``model_dump(exclude_unset=True)`` and are left
    unchanged; fields listed in ``NON_NULLABLE`` may be omitted but never sent
    as an explicit null.
    """

    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for field in self.NON_NULLABLE & self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{to_camel(field)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
