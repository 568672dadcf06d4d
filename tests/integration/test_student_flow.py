"""Integration tests for the registration, login and attendance flow."""
import json

import pytest

from iterattend.models.parse_result import ParseStatus
from iterattend.models.student import Student
from iterattend.services.registration_service import select_registration_id
from iterattend.services.student_service import build_student, parse_student


@pytest.fixture
def api_responses():
    """Responses as returned by the academic-records API."""
    return {
        "registration": json.dumps({
            "studentdata": [
                {"REGISTRATIONID": "ITERRETD2107A0000003", "REGISTRATIONDATEFROM": "2021-07-01", "SEMESTER": 1},
                {"REGISTRATIONID": "ITERRETD2207A0000007", "REGISTRATIONDATEFROM": "2022-07-01", "SEMESTER": 3},
            ]
        }),
        "login": json.dumps({
            "status": "success",
            "name": "ABHIJIT PARIDA",
            "studentid": "1441012000"
        }),
        "attendance": json.dumps({
            "griddata": [
                {"subject": "Data Structures", "subjectcode": "CSE2001", "Latt": "23 / 30", "Patt": "4 / 4", "TLPSS": 1},
                {"subject": "Discrete Mathematics", "subjectcode": "MTH2002", "Latt": "18 / 24", "Patt": "Not Applicable"},
                {"subject": "Digital Electronics", "subjectcode": "EET2003", "Latt": "", "Patt": "6 / 8"},
            ]
        }),
    }


class TestStudentFlow:
    """End-to-end parsing of one refresh."""

    def test_complete_flow(self, api_responses):
        registration_id = select_registration_id(api_responses["registration"])
        student = build_student(api_responses["login"], api_responses["attendance"])

        assert registration_id == "ITERRETD2207A0000007"
        assert student.name == "Abhijit Parida"
        assert student.get_subject_codes() == ["CSE2001", "EET2003", "MTH2002"]

        ds = student.subjects["CSE2001"]
        assert (ds.theory_present, ds.theory_total, ds.lab_present, ds.lab_total) == (23, 30, 4, 4)

        maths = student.subjects["MTH2002"]
        assert (maths.lab_present, maths.lab_total) == (0, 0)
        assert maths.theory_percentage() == 75.0

        electronics = student.subjects["EET2003"]
        assert electronics.theory_total == 0
        assert electronics.lab_percentage() == 75.0

    def test_incremental_refresh(self, api_responses):
        """Test a second refresh merges over the first one's subjects."""
        first = build_student(api_responses["login"], api_responses["attendance"])

        refreshed_grid = json.dumps({
            "griddata": [
                {"subject": "Data Structures", "subjectcode": "CSE2001", "Latt": "24 / 31", "Patt": "4 / 4"}
            ]
        })
        second = build_student(api_responses["login"], refreshed_grid, first.subjects)

        assert second.subjects["CSE2001"].theory_total == 31
        assert second.subjects["MTH2002"] is first.subjects["MTH2002"]
        assert first.subjects["CSE2001"].theory_total == 30

    def test_refresh_with_attendance_outage(self, api_responses):
        """Test an attendance outage keeps the previous subjects."""
        first = build_student(api_responses["login"], api_responses["attendance"])

        result = parse_student(api_responses["login"], "<html>503</html>", first.subjects)

        assert result.status is ParseStatus.OK
        assert result.value.subjects == first.subjects

    def test_snapshot_round_trip(self, api_responses):
        """Test the student survives persistence as a plain dict."""
        student = build_student(api_responses["login"], api_responses["attendance"])

        restored = Student.from_dict(json.loads(json.dumps(student.to_dict())))

        assert restored == student
