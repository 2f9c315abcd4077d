from .client import SwitchBotAPIClient

from .commands import DeviceCommand

from .devices import (
    RemoteCapability,
    RemoteDevice,
    air_conditioner,
    dvd,
    fan,
    light,
    speaker,
    television
)

from .exceptions import (
    SwitchBotAuthException,
    SwitchBotDeviceException,
    SwitchBotException,
    SwitchBotInvalidParametersException,
    SwitchBotNotFoundException,
    SwitchBotTransportException,
    SwitchBotUnknownException
)
