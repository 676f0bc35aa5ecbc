from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional
import json
import logging

import firebase_admin
from firebase_admin import auth as firebase_auth, credentials

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"

class Identity(BaseModel):
    """Verified principal taken from a Firebase ID token."""
    model_config = ConfigDict(frozen=True)

    uid: str
    email: str

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "You are not authorized."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "You don't have permission."):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )

def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a ``Bearer <token>`` header value, or None."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None

def load_service_account(raw: str) -> Dict[str, Any]:
    """Parse the service-account JSON kept in the environment.

    Environment variables usually carry the private key with literal ``\\n``
    sequences, which the certificate loader rejects.
    """
    info = json.loads(raw)
    if isinstance(info.get("private_key"), str):
        info["private_key"] = info["private_key"].replace("\\n", "\n")
    return info


class FirebaseIdentityVerifier:
    """Owns the Firebase app handle and verifies ID tokens against it."""

    def __init__(self):
        self.app: Optional[firebase_admin.App] = None

    def initialize(self, service_account_json: str) -> None:
        if self.app is not None:
            return
        cred = credentials.Certificate(load_service_account(service_account_json))
        self.app = firebase_admin.initialize_app(cred)
        logger.info("Firebase app initialized")

    def close(self) -> None:
        if self.app is not None:
            firebase_admin.delete_app(self.app)
            self.app = None

    def verify(self, id_token: str) -> Optional[Identity]:
        """Verify a Firebase ID token and return the identity, or None on any failure."""
        if self.app is None:
            logger.warning("Firebase app is not initialized; token treated as anonymous")
            return None
        try:
            claims = firebase_auth.verify_id_token(id_token, app=self.app)
        except Exception as e:
            logger.warning(f"Firebase token verification failed: {e}")
            return None

        email = claims.get("email")
        if not email:
            logger.warning("Verified token carries no email claim")
            return None
        return Identity(uid=claims.get("uid") or claims.get("sub") or "", email=email)


identity_verifier = FirebaseIdentityVerifier()
