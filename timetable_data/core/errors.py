"""
Domain errors raised by the store and the request adapter.

Every error carries the HTTP status it maps to and a message that is safe to
return to the client.
"""
from __future__ import annotations


class TimetableError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifier(TimetableError):
    status_code = 400

    def __init__(self, timetable_id: str):
        super().__init__(f"Invalid timetable ID {timetable_id}.")
        self.timetable_id = timetable_id


class NotFound(TimetableError):
    status_code = 404

    def __init__(self, timetable_id: str):
        super().__init__(f"Timetable with ID {timetable_id} not found.")
        self.timetable_id = timetable_id


class InvalidPayload(TimetableError):
    status_code = 400

    def __init__(self, message: str = "Invalid timetable data."):
        super().__init__(message)
