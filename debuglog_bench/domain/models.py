"""
Domain models for the Debug Logging Benchmark.

`Record` is the payload formatted into every benchmarked log line. It carries no
behavior; its only job is to be a realistically sized object whose string form
costs something to build.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    A synthetic contact record.
    """

    name: str = Field(..., description="Display name.")
    address: str = Field(..., description="Street address.")
    phone_number: str = Field(..., description="10-digit phone number.")
    email: str = Field(..., description="Email address.")
    city: str = Field(..., description="City name.")
    country: str = Field(..., description="Country name.")
    postal_code: str = Field(..., description="6-digit postal code.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def __str__(self) -> str:
        return (
            f"Record(name={self.name}, address={self.address}, "
            f"phone_number={self.phone_number}, email={self.email}, city={self.city}, "
            f"country={self.country}, postal_code={self.postal_code})"
        )


__all__ = ["Record"]
