from .models import LogContextPayload, LogRecordPayload, record_to_payload

__all__ = [
    "LogContextPayload",
    "LogRecordPayload",
    "record_to_payload",
]
