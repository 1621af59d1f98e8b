from datetime import datetime, timezone
from typing import ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base for every record exchanged with the React clients.

    Fields are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict:
        """Fields the caller actually sent, keyed by Python name."""
        return self.model_dump(exclude_unset=True)


class UpdateModel(CamelModel):
    """
    Partial-update payload.

    Every field is optional so it can be left out, but only the fields
    named in `nullable` may be sent as an explicit null.
    """
    nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        cleared = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable
        )
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self
