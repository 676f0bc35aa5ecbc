from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import logging

from ..deps import get_optional_identity, get_appointment_service
from ...core.security import Identity
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import AppointmentCreate, AppointmentPayment
from ...schemas.common import (
    InsertResultResponse, UpdateResultResponse, serialize_document
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=InsertResultResponse)
def create_appointment(
    appointment: AppointmentCreate,
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    """Book an appointment."""
    result = appointment_service.create_appointment(appointment)
    return InsertResultResponse.from_result(result)

@router.get("", response_model=List[dict])
def find_appointments(
    patientEmail: str = Query(...),
    date: str = Query(...),
    identity: Optional[Identity] = Depends(get_optional_identity),
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    """Appointments of one patient on one date.

    A bearer token is optional here; the resolved identity is only used to log
    lookups made for another patient and never restricts the result.
    """
    if identity is not None and identity.email != patientEmail:
        logger.info(f"{identity.email} listed appointments of {patientEmail}")
    appointments = appointment_service.find_appointments(patientEmail, date)
    return [serialize_document(appointment) for appointment in appointments]

@router.get("/{appointment_id}", response_model=dict)
def get_appointment(
    appointment_id: str,
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    appointment = appointment_service.get_appointment_by_id(appointment_id)
    return serialize_document(appointment)

@router.put("/{appointment_id}", response_model=UpdateResultResponse)
def set_appointment_payment(
    appointment_id: str,
    payment: AppointmentPayment,
    appointment_service: AppointmentService = Depends(get_appointment_service)
):
    """Record the payment made for an appointment."""
    result = appointment_service.set_appointment_payment(appointment_id, payment)
    return UpdateResultResponse.from_result(result)
