"""Base Pydantic schemas with strict validation."""
from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model that forbids extra fields.

    Records handed to storage or API layers inherit from this class so a
    renamed or misspelled column fails loudly instead of being dropped.

    When to use BaseModel instead:
        - Settings/config models that need extra="ignore" for env vars
        - Models parsing provider payloads that may have extra fields
    """

    model_config = ConfigDict(extra="forbid")
