"""Field rules as data, plus single-field and whole-record validation."""
import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Pattern

from studentreg.models.record import StudentRecord
from studentreg.models.validation import FieldResult, SubmitResult

EMPTY_RECORD_MESSAGE = "All fields are required. Cannot add an empty record."


@dataclass(frozen=True)
class FieldRule:
    """Required-ness is implied; `pattern` (if any) must match the whole trimmed value."""
    label: str
    pattern: Optional[Pattern[str]] = None
    pattern_message: Optional[str] = None

    @property
    def required_message(self) -> str:
        return f"{self.label} is required."


# Form order; keys are the stored field names.
FIELD_RULES: Dict[str, FieldRule] = {
    "name": FieldRule(
        "Name",
        re.compile(r"[A-Za-z\s]+"),
        "Name must contain only letters and spaces.",
    ),
    "studentId": FieldRule(
        "Student ID",
        re.compile(r"[0-9]+"),
        "Student ID must contain only numbers.",
    ),
    "class": FieldRule("Class"),
    "rollNo": FieldRule(
        "Roll No.",
        re.compile(r"[0-9]+"),
        "Roll No. must contain only numbers.",
    ),
}


def _trim(value: Optional[str]) -> str:
    return (value or "").strip()


def validate_field(kind: str, value: Optional[str]) -> FieldResult:
    """Validate one field. Raises KeyError for an unknown field kind."""
    rule = FIELD_RULES[kind]
    trimmed = _trim(value)
    if not trimmed:
        return FieldResult(False, rule.required_message)
    if rule.pattern is not None and not rule.pattern.fullmatch(trimmed):
        return FieldResult(False, rule.pattern_message)
    return FieldResult(True)


def has_empty_fields(fields: Mapping[str, Optional[str]]) -> bool:
    return any(not _trim(fields.get(kind)) for kind in FIELD_RULES)


def validate_record(fields: Mapping[str, Optional[str]]) -> SubmitResult:
    """Check a form submission. Blank fields short-circuit to the aggregate message."""
    if has_empty_fields(fields):
        return SubmitResult(
            valid=False,
            errors={"name": EMPTY_RECORD_MESSAGE},
            message=EMPTY_RECORD_MESSAGE,
        )
    errors = {}
    for kind in FIELD_RULES:
        result = validate_field(kind, fields.get(kind))
        if not result.valid:
            errors[kind] = result.message
    return SubmitResult(valid=not errors, errors=errors)


def clean_fields(fields: Mapping[str, Optional[str]]) -> StudentRecord:
    """Trimmed record from form fields (call after validate_record)."""
    return StudentRecord(
        name=_trim(fields.get("name")),
        student_id=_trim(fields.get("studentId")),
        class_name=_trim(fields.get("class")),
        roll_no=_trim(fields.get("rollNo")),
    )


def is_valid_record(record: StudentRecord) -> bool:
    return validate_record(record.to_dict()).valid
