from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Name and URL are required"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Department not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


# Store / I/O failure. The detail is a fixed message, never the cause.
class InternalError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
