"""
Exceptions raised while handling résumé submissions.

Every error carries the HTTP status and the message that is safe to show to
the caller. I/O failures keep their detail in the chained exception and in the
server log only.
"""


class ResumeMatcherError(Exception):
    status_code = 500
    message = "Error processing request"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingDocumentError(ResumeMatcherError):
    """The request carried no résumé file."""
    status_code = 400
    message = "No file uploaded"


class ProcessingError(ResumeMatcherError):
    """Something failed after the upload was accepted."""


class CatalogError(ResumeMatcherError):
    """The reference dataset could not be read."""


class RoleNotFoundError(ResumeMatcherError, LookupError):
    """No catalog row for the requested job role; matching turns this into a result."""

    def __init__(self, job_role):
        self.job_role = job_role
        super().__init__(f"Job role not found: {job_role!r}")


class ExtractionError(ResumeMatcherError):
    """Text could not be extracted from the uploaded document."""


class SubmissionLogError(ResumeMatcherError):
    """The submission could not be written to the log."""
