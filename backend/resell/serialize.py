# resell/serialize.py
from bson import ObjectId


def serialize_doc(doc):
    """Convert a Mongo document to plain JSON-able data, ObjectIds as hex strings."""
    if doc is None:
        return None
    out = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, dict):
            out[key] = serialize_doc(value)
        elif isinstance(value, list):
            out[key] = [serialize_doc(v) if isinstance(v, dict) else str(v) if isinstance(v, ObjectId) else v for v in value]
        else:
            out[key] = value
    return out


def serialize_list(docs):
    return [serialize_doc(doc) for doc in docs]


# ------------------------
# Driver results -> wire shape
# ------------------------
def insert_result(result):
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


def update_result(result):
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if upserted_id is not None else 0,
        "upsertedId": str(upserted_id) if upserted_id is not None else None,
    }


def delete_result(result):
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
