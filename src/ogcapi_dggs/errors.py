from typing import Optional


class DggsApiException(Exception):
    """
    Base exception for errors that should be reported to the API user
    (with a HTTP status code and an OGC API style exception document).
    """

    status_code: int = 500
    code: str = "Internal"
    message: str = "Unspecified server error."

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{type(self).__name__}(status_code={self.status_code!r}, code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        return {"code": self.code, "description": self.message}


class InternalException(DggsApiException):
    status_code = 500
    code = "Internal"
    message = "Server error: {message}"

    def __init__(self, message: str = "Unknown error"):
        super().__init__(message=self.message.format(message=message))


class MetadataUnavailableException(DggsApiException):
    """Grid system metadata (resolutions, identifier) of a collection could not be retrieved."""

    status_code = 500
    code = "MetadataUnavailable"
    message = "Grid system metadata is unavailable."

    def __init__(self, collection_id: str, reason: Optional[str] = None):
        message = f"Grid system metadata of collection {collection_id!r} is unavailable"
        message += f": {reason}" if reason else "."
        super().__init__(message=message)
        self.collection_id = collection_id


class CollectionNotFoundException(DggsApiException):
    status_code = 404
    code = "NotFound"
    message = "Collection does not exist."

    def __init__(self, collection_id: str):
        super().__init__(message=f"Collection {collection_id!r} does not exist.")
        self.collection_id = collection_id


class UnsupportedFormatException(DggsApiException):
    status_code = 400
    code = "InvalidParameterValue"
    message = "Unsupported output format."

    def __init__(self, requested: str, supported: list):
        super().__init__(message=f"Unsupported output format {requested!r}, should be one of {supported}.")
