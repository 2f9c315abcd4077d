"""Test exception classes."""
from __future__ import annotations

import pytest

from py_switchbot.exceptions import (
    SwitchBotAuthException,
    SwitchBotDeviceException,
    SwitchBotException,
    SwitchBotInvalidParametersException,
    SwitchBotNotFoundException,
    SwitchBotTransportException,
    SwitchBotUnknownException,
)


class TestExceptions:
    """Test exception attributes."""

    def test_auth_default_message(self):
        """Test the auth error default message."""
        err = SwitchBotAuthException()
        assert "invalid token" in str(err)
        assert err.status == str(err)

    def test_device_status_code(self):
        """Test the device error carries the status code."""
        err = SwitchBotDeviceException("Device offline", status_code=161)
        assert str(err) == "Device offline"
        assert err.status_code == 161

    def test_transport_attributes(self):
        """Test the transport error carries the HTTP status and cause."""
        cause = OSError("reset")
        err = SwitchBotTransportException("Request failed", http_status=503, error=cause)
        assert err.http_status == 503
        assert err.error is cause

    @pytest.mark.parametrize(
        "exception_type",
        [
            SwitchBotAuthException,
            SwitchBotDeviceException,
            SwitchBotTransportException,
            SwitchBotNotFoundException,
            SwitchBotInvalidParametersException,
            SwitchBotUnknownException,
        ],
    )
    def test_common_base(self, exception_type):
        """Test every exception shares the library base class."""
        assert issubclass(exception_type, SwitchBotException)
