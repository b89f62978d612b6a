"""Exception classes for treexml."""


class TreeXMLError(Exception):
    """Base exception for all treexml errors."""


class OptionsError(TreeXMLError):
    """Raised when stringifier options fail validation.

    Attributes:
        message: Human-readable error description
        errors: Validation errors reported by Pydantic (optional)
    """

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class DocumentError(TreeXMLError):
    """Raised when XML text cannot be read into a document.

    Attributes:
        message: Human-readable error description
        raw_input: The XML text that failed to parse (optional)
    """

    def __init__(self, message: str, raw_input: str | None = None):
        super().__init__(message)
        self.raw_input = raw_input
