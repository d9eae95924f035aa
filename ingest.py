"""
Submission handling: one uploaded résumé in, one match result out.
"""

import logging
import os
import uuid
from datetime import datetime
from typing import Callable, Optional

from werkzeug.utils import secure_filename

from catalog import ReferenceCatalog
from errors import MissingDocumentError, ProcessingError
from extraction import extract_text
from matcher import RoleMatcher
from models import SubmissionRecord
from submission_log import SubmissionLogger

logger = logging.getLogger(__name__)


class SubmissionHandler:
    """Runs extraction, matching and logging for a single résumé upload."""

    def __init__(
        self,
        dataset_path: str,
        log_path: str,
        upload_folder: str,
        matcher: Optional[RoleMatcher] = None,
        extractor: Optional[Callable] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.dataset_path = dataset_path
        self.upload_folder = upload_folder
        self.matcher = matcher or RoleMatcher()
        self.extractor = extractor or extract_text
        self.submission_logger = SubmissionLogger(log_path)
        self.clock = clock

    def handle(self, upload, form) -> dict:
        """
        Process an uploaded résumé.

        Args:
            upload: werkzeug FileStorage for the résumé, or None
            form: mapping with firstName, email, phone and jobRole

        Returns:
            Response body with jobRole, probability, additionalSkills,
            additionalFrameworks and feedback

        Raises:
            MissingDocumentError: no file was uploaded
            ProcessingError: anything failed after the upload was accepted
        """
        if upload is None or not upload.filename:
            logger.warning("Submission rejected: no file uploaded")
            raise MissingDocumentError()

        resume_file_name = upload.filename
        local_path = None
        try:
            local_path = self._upload_path(upload.filename)
            # A partial write is still removed in the finally block
            upload.save(local_path)
            logger.debug("Saved upload %s to %s", resume_file_name, local_path)
            return self._process(local_path, resume_file_name, form)
        except Exception as e:
            logger.exception("Error processing request for %s", resume_file_name)
            raise ProcessingError() from e
        finally:
            if local_path:
                self._discard(local_path)

    def _process(self, local_path: str, resume_file_name: str, form) -> dict:
        resume_text = self.extractor(local_path, resume_file_name)
        catalog = ReferenceCatalog.from_file(self.dataset_path)

        job_role = form.get("jobRole") or ""
        result = self.matcher.match(resume_text, job_role, catalog)
        logger.info("Scored %s for %r: %.1f%%", resume_file_name, job_role, result.probability)

        record = SubmissionRecord.stamped(form, result, resume_file_name, now=self.clock())
        self.submission_logger.append(record)

        return result.to_response()

    def _upload_path(self, original_filename: str) -> str:
        """Unique, sanitized location for the temporary copy of an upload."""
        os.makedirs(self.upload_folder, exist_ok=True)
        filename = secure_filename(original_filename) or "resume"
        return os.path.join(self.upload_folder, f"{uuid.uuid4().hex}_{filename}")

    def _discard(self, file_path: str) -> None:
        try:
            os.remove(file_path)
        except FileNotFoundError:
            pass
