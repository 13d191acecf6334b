"""Request payload models, one per write operation."""

from pydantic import BaseModel, ConfigDict


class Payload(BaseModel):
    """Base for request bodies: unknown keys are rejected."""

    # Strings arrive already trimmed by validate_payload, passwords excepted.
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    def fields_set(self) -> dict:
        """Return only the fields the client actually sent."""

        return self.model_dump(exclude_unset=True)
