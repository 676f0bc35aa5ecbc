from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from typing import List

from ..deps import get_doctor_service
from ...core.config import settings
from ...services.doctor_service import DoctorService
from ...schemas.common import InsertResultResponse, serialize_document

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.post("", response_model=InsertResultResponse)
def create_doctor(
    name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(...),
    image: UploadFile = File(...),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """Add a doctor profile; the picture is stored inline with the profile."""
    picture = image.file.read(settings.MAX_IMAGE_BYTES + 1)
    if len(picture) > settings.MAX_IMAGE_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Uploaded image too large.",
        )

    result = doctor_service.create_doctor_profile(name, email, phone, picture)
    return InsertResultResponse.from_result(result)

@router.get("", response_model=List[dict])
def list_doctors(
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    """All doctor profiles, pictures encoded as base64."""
    return [serialize_document(doctor) for doctor in doctor_service.list_doctor_profiles()]
