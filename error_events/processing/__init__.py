from .encoder import OmissionAwareEncoder, dumps_event, encode_event, format_timestamp

__all__ = [
    "OmissionAwareEncoder",
    "dumps_event",
    "encode_event",
    "format_timestamp",
]
