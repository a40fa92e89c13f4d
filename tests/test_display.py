"""
Unit tests for derived display fields.

Tests:
- Salary band boundaries
- File extension extraction
- Status colours
- Days since application
"""

from datetime import datetime, timedelta, timezone

import pytest

from jobboard.models.application import ApplicationStatus
from jobboard.services.display import days_old, file_extension, salary_band, status_color


class TestSalaryBand:
    @pytest.mark.parametrize("salary,band", [
        (0, "Entry Level"),
        (49_999, "Entry Level"),
        (50_000, "Mid Level"),
        (99_999.99, "Mid Level"),
        (100_000, "Senior Level"),
        (199_999, "Senior Level"),
        (200_000, "Executive Level"),
        (10_000_000, "Executive Level"),
    ])
    def test_band_boundaries(self, salary, band):
        assert salary_band(salary) == band


class TestFileExtension:
    @pytest.mark.parametrize("url,extension", [
        ("https://files.example.com/resume.pdf", "pdf"),
        ("https://files.example.com/Resume.PDF", "pdf"),
        ("/uploads/jane/cv.final.docx", "docx"),
        ("https://files.example.com/resume.pdf?version=2#page=1", "pdf"),
        ("resume.txt", "txt"),
    ])
    def test_extension_of_last_segment(self, url, extension):
        assert file_extension(url) == extension

    @pytest.mark.parametrize("url", [
        "https://files.example.com/resume",
        "https://files.example.com/.hidden",
        "https://files.example.com/resume.",
        "https://files.example.v2/resume",
        "",
    ])
    def test_unknown_extension(self, url):
        assert file_extension(url) == "unknown"


class TestStatusColor:
    def test_known_statuses(self):
        assert status_color("applied") == "blue"
        assert status_color("shortlisted") == "green"
        assert status_color("rejected") == "red"

    def test_accepts_enum_members(self):
        assert status_color(ApplicationStatus.SHORTLISTED) == "green"

    def test_unknown_status_is_gray(self):
        assert status_color("hired") == "gray"
        assert status_color(None) == "gray"


class TestDaysOld:
    def test_rounds_up_partial_days(self):
        now = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)
        assert days_old(now - timedelta(hours=1), now=now) == 1
        assert days_old(now - timedelta(days=2, minutes=1), now=now) == 3

    def test_whole_days(self):
        now = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)
        assert days_old(now - timedelta(days=5), now=now) == 5

    def test_same_instant_is_zero(self):
        now = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)
        assert days_old(now, now=now) == 0

    def test_naive_datetimes_are_utc(self):
        now = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)
        applied = datetime(2024, 3, 8, 12, 0)
        assert days_old(applied, now=now) == 2
