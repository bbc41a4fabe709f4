"""User-facing errors raised while turning an uploaded CSV into earnings.

Every error carries the exact message shown to the user. Pages catch
``EarningsError`` at the top of their upload handler and render ``message``.
"""

REQUIRED_COLUMNS_MESSAGE = "CSV must contain columns: Payment Received, Payment Pending, Amount Bonused"


class EarningsError(Exception):
    message = "Something went wrong while processing the file."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidFileTypeError(EarningsError):
    message = "Please upload a CSV file"


class EmptyInputError(EarningsError):
    message = "CSV must contain at least a header row and one data row"


class MissingColumnError(EarningsError):
    message = REQUIRED_COLUMNS_MESSAGE

    def __init__(self, missing, headers=()):
        self.missing = tuple(missing)
        self.headers = tuple(headers)
        super().__init__()


class ReadFailureError(EarningsError):
    message = "Error reading file. Please try again."
