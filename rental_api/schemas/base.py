from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, StringConstraints
from pydantic.alias_generators import to_camel

# Required text must be present and non-empty.
RequiredStr = Annotated[str, StringConstraints(min_length=1)]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
