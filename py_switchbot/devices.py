from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

import logging
import re

from .client import SwitchBotAPIClient
from .commands import (
    TRANSPORT_CONTROLS,
    DeviceCommand,
    change_brightness,
    change_volume,
    custom_button,
    set_air_conditioner,
    set_channel,
    set_fan_speed,
    set_timer,
    swing,
    transport_control,
    turn_off,
    turn_on
)
from .exceptions import (
    SwitchBotInvalidParametersException,
    SwitchBotNotFoundException
)
from .models import CommandResponse

@dataclass(frozen=True, eq=False)
class RemoteCapability:
    """Describes one kind of infrared appliance.

    `remote_type_pattern` must fully match the remoteType the API reports for
    a remote of this kind. `actions` maps an action name to the function that
    builds its command.
    """
    name: str
    remote_type_pattern: re.Pattern
    actions: dict[str, Callable[..., DeviceCommand]] = field(default_factory=dict)

TRANSPORT_ACTIONS = {
    control: partial(transport_control, control) for control in TRANSPORT_CONTROLS
}

LIGHT = RemoteCapability(
    name="light",
    remote_type_pattern=re.compile(r"(DIY )?Light"),
    actions={
        "change_brightness": change_brightness,
    }
)

TELEVISION = RemoteCapability(
    name="television",
    remote_type_pattern=re.compile(r"(DIY )?TV"),
    actions={
        "set_channel": set_channel,
        "change_volume": change_volume,
    }
)

AIR_CONDITIONER = RemoteCapability(
    name="air conditioner",
    remote_type_pattern=re.compile(r"(DIY )?Air Conditioner"),
    actions={
        "set_params": set_air_conditioner,
    }
)

DVD = RemoteCapability(
    name="dvd",
    remote_type_pattern=re.compile(r"(DIY )?DVD"),
    actions=dict(TRANSPORT_ACTIONS)
)

SPEAKER = RemoteCapability(
    name="speaker",
    remote_type_pattern=re.compile(r"(DIY )?Speaker"),
    actions={
        **TRANSPORT_ACTIONS,
        "change_volume": change_volume,
    }
)

FAN = RemoteCapability(
    name="fan",
    remote_type_pattern=re.compile(r"(DIY )?Fan"),
    actions={
        "swing": swing,
        "set_timer": set_timer,
        "set_speed": set_fan_speed,
    }
)

class RemoteDevice:
    def __init__(self, client: SwitchBotAPIClient, device_id: str, capability: RemoteCapability):
        self.client = client
        self.device_id = device_id
        self.capability = capability

        self.logger = logging.getLogger(__name__)

    async def validate_id(self) -> bool:
        """Check that the remote registered under this ID is of this capability's kind.

        Raises SwitchBotNotFoundException when no infrared remote has the ID.
        """
        device_list = await self.client.get_device_list()

        remote = next(filter(lambda remote: remote.device_id == self.device_id, device_list.infrared_remote_list), None)
        if remote is None:
            raise SwitchBotNotFoundException(f"{self.device_id} is not a valid device ID.")

        return self.capability.remote_type_pattern.fullmatch(remote.remote_type) is not None

    def build_command(self, action: str, *args: Any, **kwargs: Any) -> DeviceCommand:
        builder = self.capability.actions.get(action)
        if builder is None:
            raise SwitchBotInvalidParametersException(f"Action {action} is not supported by {self.capability.name}")

        return builder(*args, **kwargs)

    async def perform(self, action: str, *args: Any, **kwargs: Any) -> CommandResponse:
        command = self.build_command(action, *args, **kwargs)
        self.logger.debug(f"Performing {action} on {self.capability.name} {self.device_id}: {command}")

        return await self.client.send_control_command(self.device_id, command)

    async def turn_on(self) -> CommandResponse:
        return await self.client.send_control_command(self.device_id, turn_on())

    async def turn_off(self) -> CommandResponse:
        return await self.client.send_control_command(self.device_id, turn_off())

    async def press_button(self, button_name: str) -> CommandResponse:
        return await self.client.send_control_command(self.device_id, custom_button(button_name))

def light(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, LIGHT)

def television(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, TELEVISION)

def air_conditioner(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, AIR_CONDITIONER)

def dvd(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, DVD)

def speaker(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, SPEAKER)

def fan(client: SwitchBotAPIClient, device_id: str) -> RemoteDevice:
    return RemoteDevice(client, device_id, FAN)
