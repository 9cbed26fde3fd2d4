"""Base model configuration for events, options and SARIF wire objects."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that accepts both field names and aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
