"""Pure transformation from the record list to table rows and form state."""
from typing import List, Optional

from studentreg.config import TABLE_SCROLL_MAX_HEIGHT
from studentreg.core.record_store import RecordStore
from studentreg.models.record import StudentRecord
from studentreg.models.view import FormState, RecordRow, TableView


def build_rows(records: List[StudentRecord]) -> List[RecordRow]:
    return [
        RecordRow(
            index=i,
            name=r.name,
            student_id=r.student_id,
            class_name=r.class_name,
            roll_no=r.roll_no,
        )
        for i, r in enumerate(records)
    ]


def needs_scrollbar(content_height: Optional[float], max_height: int = TABLE_SCROLL_MAX_HEIGHT) -> bool:
    """True when rendered content is taller than the viewport threshold."""
    return content_height is not None and content_height > max_height


def build_table(
    records: List[StudentRecord],
    content_height: Optional[float] = None,
    max_height: int = TABLE_SCROLL_MAX_HEIGHT,
) -> TableView:
    return TableView(
        rows=build_rows(records),
        is_empty=not records,
        max_height=max_height,
        scrollable=needs_scrollbar(content_height, max_height),
    )


def build_form_state(store: RecordStore) -> FormState:
    cursor = store.edit_cursor
    editing = cursor is not None
    return FormState(
        mode="edit" if editing else "add",
        submit_label="Update" if editing else "Add",
        show_cancel=editing,
        edit_index=cursor,
        values=store.form_values(),
    )
