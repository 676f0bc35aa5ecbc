"""
Wire representation of MongoDB documents and write results.

ObjectIds are rendered as hex strings and binary payloads as base64 so that
store results can be returned to clients verbatim.
"""
from bson import ObjectId
from pydantic import BaseModel
from pymongo.results import InsertOneResult, UpdateResult
from typing import Any, Optional
import base64


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    # bson.Binary is a bytes subclass
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: Optional[dict]) -> Optional[dict]:
    """Convert a stored document into a JSON-compatible dict."""
    if document is None:
        return None
    return serialize_value(document)


class InsertResultResponse(BaseModel):
    acknowledged: bool
    insertedId: str

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


class UpdateResultResponse(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultResponse":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted_id is None else 1,
            upsertedId=None if upserted_id is None else str(upserted_id),
        )


class MessageResponse(BaseModel):
    message: str
