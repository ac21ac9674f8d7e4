from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelPayload(BaseModel):
    """Request body: binds camelCase keys only and never coerces types."""

    model_config = ConfigDict(alias_generator=to_camel, strict=True)


class HealthResponse(BaseModel):
    status: str
    message: str
