from pydantic import BaseModel, ConfigDict


class AppointmentCreate(BaseModel):
    """Booking payload.

    Only the fields used for lookups are required; any other booking details
    are kept on the document unchanged.
    """
    model_config = ConfigDict(extra="allow")

    patientEmail: str
    date: str


class AppointmentPayment(BaseModel):
    """Payment outcome attached to an appointment, stored as sent."""
    model_config = ConfigDict(extra="allow")
