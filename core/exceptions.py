from fastapi import status


class PersistenceError(Exception):
    """Raised when a write to the database did not take effect"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
