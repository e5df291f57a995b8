from pydantic import BaseModel, ConfigDict


class SerdeBase(BaseModel):
    """Base for every request and response body.

    Unknown keys are dropped so older clients keep working. Responses can be
    validated straight from ORM objects.
    """

    model_config = ConfigDict(extra="ignore", from_attributes=True)
