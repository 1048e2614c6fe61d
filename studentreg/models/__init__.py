"""Data models for records, validation results, and table view."""
from studentreg.models.record import StudentRecord
from studentreg.models.validation import FieldResult, SubmitResult
from studentreg.models.view import FormState, RecordRow, TableView

__all__ = [
    "StudentRecord",
    "FieldResult",
    "SubmitResult",
    "RecordRow",
    "TableView",
    "FormState",
]
