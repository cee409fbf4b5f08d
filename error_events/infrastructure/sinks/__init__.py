from .json_file_sink import JsonFileEventSink

__all__ = ["JsonFileEventSink"]
