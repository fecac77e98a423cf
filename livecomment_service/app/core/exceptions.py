from fastapi import HTTPException, status


class InvalidArgumentError(HTTPException):
    def __init__(self, detail: str = "Invalid argument"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "You need to login"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class PermissionDeniedError(HTTPException):
    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class SpamRejectedError(HTTPException):
    """Comment text contains an NG word registered for the livestream."""

    def __init__(self, detail: str = "This comment was judged as spam"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InternalError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
