"""Student data model."""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping

from iterattend.models.subject import Subject


@dataclass
class Student:
    """A student and their attendance per subject code."""

    name: str
    subjects: Dict[str, Subject] = field(default_factory=dict)

    def __post_init__(self):
        """Validate student data after initialization."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Student name cannot be empty")

        for code, subject in self.subjects.items():
            if code != subject.code:
                raise ValueError(
                    f"Subject key ({code}) must match subject code ({subject.code})"
                )

    def merge_subjects(self, subjects: Mapping[str, Subject]) -> "Student":
        """
        Return a copy of this student with subjects merged in.

        Args:
            subjects: Subjects keyed by code; entries overwrite existing
                      subjects with the same code

        Returns:
            New Student; this instance is left unchanged
        """
        merged = dict(self.subjects)
        merged.update(subjects)
        return replace(self, subjects=merged)

    def get_subject_codes(self):
        """Subject codes in sorted order."""
        return sorted(self.subjects)

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to a plain dictionary for persistence."""
        return {
            "name": self.name,
            "subjects": {code: s.to_dict() for code, s in self.subjects.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        """Create a student from a dictionary produced by to_dict()."""
        subjects_data = data.get("subjects", {})
        return cls(
            name=data["name"],
            subjects={
                code: Subject.from_dict(subject_data)
                for code, subject_data in subjects_data.items()
            }
        )
