class SwitchBotException(Exception):
    """Base class for all errors raised by the client library"""

    def __init__(self, status):
        """Initialize exception"""
        super(SwitchBotException, self).__init__(status)
        self.status = status

class SwitchBotAuthException(SwitchBotException):
    """Raised when the API rejects the access token"""

    def __init__(self, status="Http 401 Error. User permission is denied due to invalid token."):
        """Initialize exception"""
        super(SwitchBotAuthException, self).__init__(status)

class SwitchBotDeviceException(SwitchBotException):
    """Raised when the API reports a status code other than 100"""

    def __init__(self, status, status_code: int | None = None):
        """Initialize exception"""
        super(SwitchBotDeviceException, self).__init__(status)
        self.status_code = status_code

class SwitchBotTransportException(SwitchBotException):
    """Raised when the HTTP request itself fails"""

    def __init__(self, status, http_status: int | None = None, error: BaseException | None = None):
        """Initialize exception"""
        super(SwitchBotTransportException, self).__init__(status)
        self.http_status = http_status
        self.error = error

class SwitchBotNotFoundException(SwitchBotException):
    """Raised when a device ID is not present in the infrared remote list"""

    def __init__(self, status):
        """Initialize exception"""
        super(SwitchBotNotFoundException, self).__init__(status)

class SwitchBotInvalidParametersException(SwitchBotException):
    """Raised when invalid parameters are passed to the client library"""

    def __init__(self, status):
        """Initialize exception"""
        super(SwitchBotInvalidParametersException, self).__init__(status)

class SwitchBotUnknownException(SwitchBotException):
    """Raised when a response cannot be mapped to a known model"""

    def __init__(self, status):
        """Initialize exception"""
        super(SwitchBotUnknownException, self).__init__(status)
