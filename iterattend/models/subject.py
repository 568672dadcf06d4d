"""Subject attendance data model."""
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class Subject:
    """One course's theory and lab attendance standing."""

    name: str
    code: str
    theory_present: int
    theory_total: int
    lab_present: int
    lab_total: int
    last_updated: int  # epoch milliseconds, time of parsing

    def __post_init__(self):
        """Validate subject data after initialization."""
        if not isinstance(self.code, str):
            raise ValueError("Subject code must be a string")

        for counter in ("theory_present", "theory_total", "lab_present", "lab_total"):
            value = getattr(self, counter)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{counter} must be a non-negative integer, got: {value!r}")

    @classmethod
    def blank(cls, name: str, code: str, last_updated: int) -> "Subject":
        """Create a subject with all attendance counters at zero."""
        return cls(
            name=name,
            code=code,
            theory_present=0,
            theory_total=0,
            lab_present=0,
            lab_total=0,
            last_updated=last_updated
        )

    @staticmethod
    def _percentage(present: int, total: int) -> float:
        if total == 0:
            return 0.0
        return (present / total) * 100.0

    def theory_percentage(self) -> float:
        """Theory attendance percentage (0-100), 0.0 when no classes held."""
        return self._percentage(self.theory_present, self.theory_total)

    def lab_percentage(self) -> float:
        """Lab attendance percentage (0-100), 0.0 when no classes held."""
        return self._percentage(self.lab_present, self.lab_total)

    def present(self) -> int:
        return self.theory_present + self.lab_present

    def total(self) -> int:
        return self.theory_total + self.lab_total

    def overall_percentage(self) -> float:
        """Combined theory and lab attendance percentage."""
        return self._percentage(self.present(), self.total())

    def classes_needed(self, threshold: int) -> int:
        """
        Count consecutive classes to attend to reach the threshold.

        Args:
            threshold: Target percentage, 1-99

        Returns:
            Smallest n such that (present + n) / (total + n) >= threshold%,
            0 if already at or above the threshold
        """
        # (p + n) * 100 >= t * (T + n)  <=>  n >= (t*T - 100*p) / (100 - t)
        deficit = threshold * self.total() - 100 * self.present()
        if deficit <= 0:
            return 0
        return -(-deficit // (100 - threshold))

    def classes_can_skip(self, threshold: int) -> int:
        """
        Count classes that can be missed while staying at the threshold.

        Args:
            threshold: Target percentage, 1-99

        Returns:
            Largest n such that present / (total + n) >= threshold%,
            0 if already below the threshold
        """
        surplus = 100 * self.present() - threshold * self.total()
        if surplus <= 0:
            return 0
        return surplus // threshold

    def to_dict(self) -> Dict[str, Any]:
        """Convert subject to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Subject":
        """Create a subject from a dictionary produced by to_dict()."""
        return cls(
            name=data["name"],
            code=data["code"],
            theory_present=data.get("theory_present", 0),
            theory_total=data.get("theory_total", 0),
            lab_present=data.get("lab_present", 0),
            lab_total=data.get("lab_total", 0),
            last_updated=data["last_updated"]
        )
