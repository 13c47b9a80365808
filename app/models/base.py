"""Shared pydantic configuration for records and API payloads."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps in stored documents are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """
    Base class for persisted records and request/response bodies.

    Attributes are snake_case in Python and camelCase on disk and on the
    wire (tech_stack <-> "techStack"), matching the JSON documents the
    React client and older deployments already use. Either spelling is
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
