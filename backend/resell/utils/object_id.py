# resell/utils/object_id.py
from bson import ObjectId

from resell.core.errors import ValidationError


def parse_object_id(value: str, label: str = "id") -> ObjectId:
    if not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {label}")
    return ObjectId(value)
