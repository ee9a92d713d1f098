"""
Domain exceptions raised by the service layer.

Routes translate these into HTTP responses; services never build
``HTTPException`` themselves.
"""


class ReferenceNotFound(LookupError):
    """A submitted youth or program identifier does not exist.

    Raised by attendance ingestion before anything is written, so a
    failed submission leaves every store untouched.
    """

    def __init__(self, message: str = "Related youth or program not found", **references: str) -> None:
        super().__init__(message)
        self.message = message
        self.references = references
