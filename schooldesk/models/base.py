"""Base record type shared by every stored model."""
import pydantic
from pydantic import BaseModel

from schooldesk.errors import ValidationError


class Document(BaseModel):
    """A record kept in the in-memory store.

    Subclasses declare their collection and id prefix in an inner ``Settings``
    class. ``id`` is assigned by ``Store.insert`` when left empty.
    """

    id: str = ""

    class Settings:
        name = "documents"
        prefix = "doc"

    def apply_update(self, data: BaseModel):
        """Copy of this record with the fields set on ``data`` applied.

        The result is validated again, so an explicit ``None`` for a required
        field raises ``ValidationError`` instead of being stored.
        """
        fields = {**self.model_dump(), **data.model_dump(exclude_unset=True)}
        try:
            return type(self).model_validate(fields)
        except pydantic.ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(f"Invalid {self.Settings.name} update: {problems}")
