from typing import Optional


class EpicFailsError(Exception):
    """Exception raised for invalid epic fail simulations."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = message
        if details:
            full_message += f"\nDetails: {details}"
        super().__init__(full_message)
