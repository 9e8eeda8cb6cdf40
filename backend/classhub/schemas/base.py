from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ORMModel(BaseModel):
    # Public JSON uses camelCase keys; snake_case is still accepted on input.
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


class MessageResponse(ORMModel):
    message: str
