"""Analyzer gateway exceptions. None of these are retried inside the gateway."""


class AnalyzerError(Exception):
    """Base exception for analysis acquisition errors."""

    pass


class ConfigurationError(AnalyzerError):
    """Raised when the analyzer endpoint or key is not configured."""

    pass


class SubmissionError(AnalyzerError):
    """Raised when the analyzer rejects a request or no job id can be found.

    Attributes:
        status_code: HTTP status of the rejected request, if there was one
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RemoteFailure(AnalyzerError):
    """Raised when the analysis job fails remotely.

    Attributes:
        job_id: The analyzer job identifier
        message: Error message reported by the analyzer
    """

    def __init__(self, job_id: str, message: str):
        self.job_id = job_id
        self.message = message
        super().__init__(f"Analysis failed for job {job_id}: {message}")


class AcquisitionTimeout(AnalyzerError):
    """Raised when the job does not finish within the polling budget.

    Attributes:
        job_id: The analyzer job identifier
        attempts: Number of status polls made
    """

    def __init__(self, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            f"Analysis timed out for job {job_id} after {attempts} polling attempts"
        )


class MalformedResult(AnalyzerError):
    """Raised when a succeeded job carries no usable regions or fields."""

    pass
