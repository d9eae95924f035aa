"""
Submission Logger - records every résumé submission in a spreadsheet.

The log is an .xlsx workbook with a single ``UserData`` sheet. Spreadsheets
cannot be appended to in place, so each append reads the whole sheet, adds a
row and writes a fresh copy that replaces the old file.
"""

import logging
import os
import uuid
from threading import Lock

import pandas as pd

from errors import SubmissionLogError
from models import SubmissionRecord

logger = logging.getLogger(__name__)

SHEET_NAME = "UserData"
MISSING_VALUE = "N/A"

LOG_COLUMNS = [
    "First Name",
    "Email",
    "Phone",
    "Signup Date",
    "Signup Time",
    "Job Role",
    "Probability Score",
    "Resume File",
]
TEXT_COLUMNS = [column for column in LOG_COLUMNS if column != "Probability Score"]

# Guards the read-modify-write within this process only
_log_lock = Lock()


class SubmissionLogger:
    """Appends submission records to a spreadsheet log."""

    def __init__(self, log_path: str):
        self.log_path = log_path

    def append(self, record: SubmissionRecord) -> None:
        """Add ``record`` as the last row, creating the log with its header if needed."""
        row = self.to_row(record)

        with _log_lock:
            try:
                existing = self._read_existing()
                new_row = pd.DataFrame([row])
                if existing.empty:
                    combined = new_row.reindex(columns=existing.columns)
                else:
                    combined = pd.concat([existing, new_row], ignore_index=True)
                self._write(combined)
            except SubmissionLogError:
                raise
            except Exception as e:
                raise SubmissionLogError(f"Could not append to {self.log_path}: {e}") from e

        logger.info("Logged submission for %s (%.1f%%)", row["Job Role"], record.probability_score)

    @staticmethod
    def to_row(record: SubmissionRecord) -> dict:
        return {
            "First Name": record.first_name or MISSING_VALUE,
            "Email": record.email or MISSING_VALUE,
            "Phone": record.phone or MISSING_VALUE,
            "Signup Date": record.signup_date,
            "Signup Time": record.signup_time,
            "Job Role": record.job_role or MISSING_VALUE,
            "Probability Score": record.probability_score,
            "Resume File": record.resume_file_name,
        }

    def _read_existing(self) -> pd.DataFrame:
        if not os.path.exists(self.log_path):
            logger.info("Creating submission log at %s", self.log_path)
            return pd.DataFrame(columns=LOG_COLUMNS)

        frame = pd.read_excel(
            self.log_path,
            sheet_name=0,
            dtype={column: str for column in TEXT_COLUMNS},
            keep_default_na=False,
        )
        # Header columns lost from a hand-edited log are restored at the end
        for column in LOG_COLUMNS:
            if column not in frame.columns:
                frame[column] = ""
        return frame

    def _write(self, frame: pd.DataFrame) -> None:
        directory = os.path.dirname(os.path.abspath(self.log_path))
        os.makedirs(directory, exist_ok=True)

        stem = os.path.splitext(os.path.basename(self.log_path))[0]
        temp_path = os.path.join(directory, f".{stem}.{uuid.uuid4().hex}.tmp.xlsx")
        try:
            with pd.ExcelWriter(temp_path, engine="openpyxl") as writer:
                frame.to_excel(writer, sheet_name=SHEET_NAME, index=False)
            os.replace(temp_path, self.log_path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

    def read_all(self) -> pd.DataFrame:
        """Return the logged submissions (empty frame if the log does not exist yet)."""
        with _log_lock:
            return self._read_existing()
