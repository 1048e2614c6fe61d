"""View-model handed to the presentation layer."""
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional


@dataclass
class RecordRow:
    """One table row; actions report `index` back to the store."""
    index: int
    name: str
    student_id: str
    class_name: str
    roll_no: str
    actions: List[str] = field(default_factory=lambda: ["edit", "delete"])


@dataclass
class TableView:
    rows: List[RecordRow]
    is_empty: bool
    max_height: int
    scrollable: bool


@dataclass
class FormState:
    mode: Literal["add", "edit"]
    submit_label: str
    show_cancel: bool
    edit_index: Optional[int]
    values: Dict[str, str]
