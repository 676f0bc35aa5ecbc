from fastapi import Depends, Header
from pymongo.database import Database
from typing import Optional

from ..core.database import get_db
from ..core.security import (
    Identity, FirebaseIdentityVerifier, AuthenticationError,
    identity_verifier, parse_bearer_token
)
from ..services.user_service import UserService
from ..services.appointment_service import AppointmentService
from ..services.doctor_service import DoctorService
from ..services.payment_service import PaymentService, StripePaymentGateway, get_payment_gateway

def get_identity_verifier() -> FirebaseIdentityVerifier:
    """Get the process-wide Firebase verifier."""
    return identity_verifier

# Optional authentication: resolves the caller, never rejects the request
def get_optional_identity(
    authorization: Optional[str] = Header(None),
    verifier: FirebaseIdentityVerifier = Depends(get_identity_verifier)
) -> Optional[Identity]:
    """Identity from a ``Bearer`` token, or None when absent or invalid."""
    token = parse_bearer_token(authorization)
    if token is None:
        return None
    return verifier.verify(token)

# Required authentication: resolved before the request body is validated
def require_identity(
    identity: Optional[Identity] = Depends(get_optional_identity)
) -> Identity:
    """Identity of the caller; 401 when the request carries none."""
    if identity is None:
        raise AuthenticationError()
    return identity

def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)

def get_appointment_service(db: Database = Depends(get_db)) -> AppointmentService:
    return AppointmentService(db)

def get_doctor_service(db: Database = Depends(get_db)) -> DoctorService:
    return DoctorService(db)

def get_payment_service(
    gateway: StripePaymentGateway = Depends(get_payment_gateway)
) -> PaymentService:
    return PaymentService(gateway)
