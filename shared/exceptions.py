# shared/exceptions.py


class AssessmentError(Exception):
    """Base class for scoring engine failures"""


class NoResponsesError(AssessmentError, ValueError):
    """Raised when an empty response set reaches overall scoring or assembly"""

    def __init__(self, message: str = "At least one response is required to score an assessment"):
        super().__init__(message)


class InvalidResponseError(AssessmentError, ValueError):
    """Raised when a response references a question that is not in the catalog"""


class ConfigurationError(AssessmentError):
    """Catalog or reference constants are inconsistent; never tolerated silently"""


class LLMServiceError(Exception):
    """Every configured language-model provider failed"""


class LLMConfigurationError(LLMServiceError):
    """No language-model provider is configured"""
