VALIDATION_MESSAGE = "Please fill in all required fields."
DELIVERY_MESSAGE = "Failed to send email. Please try again."


class ContactError(Exception):
    """Base for contact-form failures.

    ``public_message`` is the only text that reaches the client; ``str(exc)``
    is kept for the server log.
    """

    status_code = 500
    public_message = DELIVERY_MESSAGE


class ValidationError(ContactError):
    status_code = 400
    public_message = VALIDATION_MESSAGE

    def __init__(self, message: str = VALIDATION_MESSAGE):
        super().__init__(message)


class ConfigurationError(ContactError):
    pass


class DeliveryError(ContactError):
    pass
