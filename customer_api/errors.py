class CustomerStoreError(Exception):
    """Base error raised by the customer store; `message` is client-facing."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CustomerStoreError):
    # required field missing or empty on create
    status_code = 400

    def __init__(self, message: str = "Name, email, and company are required") -> None:
        super().__init__(message)


class NotFoundError(CustomerStoreError):
    status_code = 404

    def __init__(self, cid: object = None, message: str = "Customer not found") -> None:
        super().__init__(message)
        self.cid = cid
