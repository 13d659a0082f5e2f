"""Schema of a decoded flight recording.

Every field maps to a lower-camel-case key in the external document, e.g.
``plane_information.fuel_capacity`` is read from ``planeInformation.fuelCapacity``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1


class FlygModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
        allow_inf_nan=False,
        extra="ignore",
    )


class PlaneInformation(FlygModel):
    """Mostly static information about the plane used to perform the flight."""

    name: str
    fuel_capacity: int = Field(ge=0, le=U32_MAX, description="Overall fuel the plane can carry (gallons).")
    number_of_engines: int = Field(ge=0, le=U8_MAX)
    fuel_weight: float = Field(default=0.0, description="Weight of the fuel (pounds per gallon).")
    unusable_fuel_quantity: float = Field(default=0.0, description="Fuel present but not usable (gallons).")


class Times(FlygModel):
    """Boundaries of the four phases of a flight, as recorded by the simulator.

    Block-off is the first movement under the plane's own power, takeoff the
    moment it becomes airborne, landing the moment the wheels touch the runway
    and block-on the final stop with engines shut down.
    """

    block_off_time: str
    takeoff_time: str
    landing_time: str
    block_on_time: str


class FuelRecord(FlygModel):
    fuel_quantity: float = Field(description="Fuel remaining at sample time (gallons).")


class FlightRecording(FlygModel):
    """Root of any recorded flight."""

    plane_information: PlaneInformation
    landing_speed: float = Field(description="Touchdown speed (feet per second).")
    times: Times
    fuel_records: tuple[FuelRecord, ...] = ()
