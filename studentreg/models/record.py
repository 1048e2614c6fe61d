"""Student record and its stored (wire) form."""
from dataclasses import dataclass


@dataclass(frozen=True)
class StudentRecord:
    """One student's name / ID / class / roll number, all trimmed strings."""
    name: str
    student_id: str
    class_name: str
    roll_no: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "studentId": self.student_id,
            "class": self.class_name,
            "rollNo": self.roll_no,
        }

    @classmethod
    def from_dict(cls, item: dict) -> "StudentRecord":
        """Build from a stored object. Raises KeyError/TypeError on bad shape."""
        values = (item["name"], item["studentId"], item["class"], item["rollNo"])
        if not all(isinstance(v, str) for v in values):
            raise TypeError("record fields must be strings")
        return cls(*values)
