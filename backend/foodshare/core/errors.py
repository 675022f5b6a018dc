"""
Domain exceptions raised by the service layer.

Routers never catch these; the handlers registered in main.py turn them
into HTTP responses.
"""


class FoodShareError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(FoodShareError):
    """Unknown id on a record operation."""

    status_code = 404

    def __init__(self, resource: str, resource_id=None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(FoodShareError):
    """The record is not in a state that allows the requested change."""

    status_code = 409
