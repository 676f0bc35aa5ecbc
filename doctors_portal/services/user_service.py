from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult
import logging

from ..core.database import USERS_COLLECTION
from ..core.security import (
    ADMIN_ROLE, Identity, AuthorizationError
)
from ..schemas.user import UserCreate, UserUpsert

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Database):
        self.users = db[USERS_COLLECTION]

    def create_user(self, user_data: UserCreate) -> InsertOneResult:
        """Insert a registered user with the fields the client sent."""
        document = user_data.model_dump(exclude_unset=True)
        # Roles are granted only through the admin route
        document.pop("role", None)
        return self.users.insert_one(document)

    def upsert_user(self, user_data: UserUpsert) -> UpdateResult:
        """Update or insert the profile fields for an email; role is left alone."""
        update = {
            "$set": {
                "displayName": user_data.displayName,
                "email": user_data.email,
                "phoneNumber": user_data.phoneNumber,
                "photoURL": user_data.photoURL,
            }
        }
        return self.users.update_one({"email": user_data.email}, update, upsert=True)

    def is_admin(self, email: str) -> bool:
        user = self.users.find_one({"email": email})
        return user is not None and user.get("role") == ADMIN_ROLE

    def set_admin_role(self, email: str) -> UpdateResult:
        """Grant the admin role to an existing user."""
        return self.users.update_one(
            {"email": email}, {"$set": {"role": ADMIN_ROLE}}, upsert=False
        )

    def grant_admin(self, requester: Identity, target_email: str) -> UpdateResult:
        """Make ``target_email`` an admin on behalf of an admin requester.

        The role lookup and the update are separate store calls; a role change
        landing between them is not guarded against.
        """
        if not self.is_admin(requester.email):
            logger.info(f"Admin role request by {requester.email} denied")
            raise AuthorizationError()

        logger.info(f"{requester.email} granted admin role to {target_email}")
        return self.set_admin_role(target_email)
