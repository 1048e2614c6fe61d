"""Validation results for single fields and whole form submissions."""
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class FieldResult:
    valid: bool
    message: Optional[str] = None


@dataclass
class SubmitResult:
    """Outcome of validating (and possibly storing) a form submission."""
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None
    index: Optional[int] = None  # position written on success
