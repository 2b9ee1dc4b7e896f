"""Form driving exports."""

from .case_driver import classify, drive_testcase, selected_option
from .form_page import FormPage, PlaywrightFormPage

__all__ = [
    "FormPage",
    "PlaywrightFormPage",
    "classify",
    "drive_testcase",
    "selected_option",
]
