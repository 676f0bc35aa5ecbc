from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.results import InsertOneResult, UpdateResult
from typing import List

from ..core.database import APPOINTMENTS_COLLECTION
from ..schemas.appointment import AppointmentCreate, AppointmentPayment

class AppointmentNotFoundError(LookupError):
    def __init__(self, appointment_id: str):
        super().__init__(f"Appointment {appointment_id} not found")
        self.appointment_id = appointment_id

class AppointmentService:
    def __init__(self, db: Database):
        self.appointments = db[APPOINTMENTS_COLLECTION]

    @staticmethod
    def _object_id(appointment_id: str) -> ObjectId:
        try:
            return ObjectId(appointment_id)
        except (InvalidId, TypeError):
            raise AppointmentNotFoundError(appointment_id)

    def create_appointment(self, appointment: AppointmentCreate) -> InsertOneResult:
        return self.appointments.insert_one(appointment.model_dump())

    def find_appointments(self, patient_email: str, date: str) -> List[dict]:
        """All appointments booked by a patient on a date."""
        query = {"patientEmail": patient_email, "date": date}
        return list(self.appointments.find(query))

    def get_appointment_by_id(self, appointment_id: str) -> dict:
        appointment = self.appointments.find_one({"_id": self._object_id(appointment_id)})
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def set_appointment_payment(self, appointment_id: str, payment: AppointmentPayment) -> UpdateResult:
        """Attach the payment outcome to an appointment."""
        return self.appointments.update_one(
            {"_id": self._object_id(appointment_id)},
            {"$set": {"payment": payment.model_dump()}},
        )
