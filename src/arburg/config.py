"""
Validated configuration for Burg AR models.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class BurgConfig(BaseModel):
    """
    Model configuration.

    Args:
        order: AR model order (number of coefficients), strictly positive
    """

    model_config = ConfigDict(frozen=True)

    order: StrictInt = Field(gt=0, description="AR model order")
