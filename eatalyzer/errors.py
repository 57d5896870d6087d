class EatalyzerError(Exception):
    """Base class for application errors"""


class InvalidImageTypeError(EatalyzerError):
    """Selected file is not an image"""

    def __init__(self, content_type: str):
        super().__init__(f"unsupported content type: {content_type or '(none)'}")
        self.content_type = content_type


class ImageReadError(EatalyzerError):
    """Selected file could not be read"""


class AnalysisError(EatalyzerError):
    """
    Raised when the vision model call fails for any reason.
    Network errors and malformed replies share this type; the underlying
    exception is chained as __cause__.
    """


class ConfigurationError(EatalyzerError):
    """Missing or invalid configuration"""
