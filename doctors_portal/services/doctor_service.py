from bson import Binary
from pymongo.database import Database
from pymongo.results import InsertOneResult
from typing import List

from ..core.database import DOCTORS_COLLECTION

class DoctorService:
    def __init__(self, db: Database):
        self.doctors = db[DOCTORS_COLLECTION]

    def create_doctor_profile(self, name: str, email: str, phone: str, image: bytes) -> InsertOneResult:
        """Store a doctor profile with the uploaded picture inline as BSON binary."""
        document = {
            "name": name,
            "email": email,
            "phone": phone,
            "image": Binary(image),
        }
        return self.doctors.insert_one(document)

    def list_doctor_profiles(self) -> List[dict]:
        return list(self.doctors.find({}))
