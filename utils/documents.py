from datetime import datetime
from bson import ObjectId
from bson.errors import InvalidId

from utils.errors import InvalidIdError


def to_object_id(id_str):
    """Parse a client-supplied identifier into the store's native ObjectId."""
    if isinstance(id_str, ObjectId):
        return id_str
    try:
        return ObjectId(str(id_str))
    except (InvalidId, TypeError):
        raise InvalidIdError(f"Invalid ID format: {id_str!r}")


def serialize(value):
    """Make a document JSON-safe: ObjectIds become strings, datetimes ISO strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value
