"""Student records: list, table view, form submit, edit/cancel, delete, field validation."""
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from studentreg.api.state import AppState, get_state
from studentreg.core.table_view import build_form_state, build_table
from studentreg.core.validation import validate_field

router = APIRouter()


class RecordFormBody(BaseModel):
    """Raw form fields; validation happens in the store, not here."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    student_id: Optional[str] = Field(default=None, alias="studentId")
    class_name: Optional[str] = Field(default=None, alias="class")
    roll_no: Optional[str] = Field(default=None, alias="rollNo")


class ValidateFieldBody(BaseModel):
    field: str
    value: Optional[str] = None


def _form_to_dict(state: AppState) -> dict:
    return asdict(build_form_state(state.store))


@router.get("/")
def list_records(state: AppState = Depends(get_state)):
    """List all student records in display order."""
    return [r.to_dict() for r in state.store.records]


@router.get("/view")
def get_view(
    content_height: Optional[float] = None,
    state: AppState = Depends(get_state),
):
    """Table rows, empty-state flag, scroll toggle, and current form state."""
    table = build_table(state.store.records, content_height=content_height)
    return {"table": asdict(table), "form": _form_to_dict(state)}


@router.post("/")
def submit_record(body: RecordFormBody, state: AppState = Depends(get_state)):
    """Submit the form: updates the record being edited, otherwise adds a new one."""
    result = state.store.submit(body.model_dump(by_alias=True))
    if not result.valid:
        raise HTTPException(
            status_code=400,
            detail={"message": result.message, "errors": result.errors},
        )
    return {
        "index": result.index,
        "records": [r.to_dict() for r in state.store.records],
        "form": _form_to_dict(state),
    }


@router.post("/validate")
def validate_one(body: ValidateFieldBody):
    """Validate a single field as the user types."""
    try:
        result = validate_field(body.field, body.value)
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Unknown field: {body.field}")
    return {"valid": result.valid, "message": result.message}


@router.post("/cancel")
def cancel_edit(state: AppState = Depends(get_state)):
    """Leave edit mode and return the form to add mode."""
    state.store.cancel_edit()
    return _form_to_dict(state)


@router.post("/{index}/edit")
def start_edit(index: int, state: AppState = Depends(get_state)):
    """Load a record into the form. Unknown index leaves the form unchanged."""
    state.store.start_edit(index)
    return _form_to_dict(state)


@router.delete("/{index}", status_code=204)
def delete_record(index: int, state: AppState = Depends(get_state)):
    """Delete a record. Unknown index is ignored."""
    state.store.delete(index)
