from dataclasses import dataclass
from typing import Any

from .exceptions import SwitchBotInvalidParametersException

COMMAND_TYPE_COMMAND = "command"
COMMAND_TYPE_CUSTOMIZE = "customize"

DEFAULT_PARAMETER = "default"

AIR_CONDITIONER_MODES = {
    "auto": 1,
    "cool": 2,
    "dry": 3,
    "fan": 4,
    "heat": 5,
}

AIR_CONDITIONER_FAN_SPEEDS = {
    "auto": 1,
    "low": 2,
    "medium": 3,
    "high": 4,
}

POWER_STATES = ("on", "off")

CURTAIN_MODES = ("0", "1", "ff")

HUMIDIFIER_PRESET_MODES = ("auto", "101", "102", "103")

SMART_FAN_MODES = (1, 2)

SMART_FAN_SPEEDS = (1, 2, 3, 4)

TRANSPORT_CONTROLS = {
    "mute": "setMute",
    "fast_forward": "FastForward",
    "rewind": "Rewind",
    "next": "Next",
    "previous": "Previous",
    "pause": "Pause",
    "play": "Play",
    "stop": "Stop",
}

FAN_SPEEDS = {
    "low": "lowSpeed",
    "middle": "middleSpeed",
    "high": "highSpeed",
}

@dataclass(frozen=True)
class DeviceCommand:
    command: str
    parameter: str | int = DEFAULT_PARAMETER
    command_type: str = COMMAND_TYPE_COMMAND

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "parameter": self.parameter,
            "commandType": self.command_type,
        }

def lookup(table: dict[str, Any], key: str, name: str) -> Any:
    value = table.get(key)
    if value is None:
        raise SwitchBotInvalidParametersException(f"Unknown {name}: {key}")

    return value

def require_power_state(power_state: str) -> str:
    if power_state not in POWER_STATES:
        raise SwitchBotInvalidParametersException(f"Unknown power state: {power_state}")

    return power_state

# Wire parameter serializers

def encode_air_conditioner_parameter(temperature: int, mode: str, fan_speed: str, power_state: str) -> str:
    """Encode the setAll parameter as "<temperature>,<mode>,<fan speed>,<power state>".

    Modes map to 1-5 (auto, cool, dry, fan, heat) and fan speeds to 1-4
    (auto, low, medium, high).
    """
    mode_param = lookup(AIR_CONDITIONER_MODES, mode, "air conditioner mode")
    fan_speed_param = lookup(AIR_CONDITIONER_FAN_SPEEDS, fan_speed, "fan speed")
    return f"{temperature},{mode_param},{fan_speed_param},{require_power_state(power_state)}"

def decode_air_conditioner_parameter(parameter: str) -> tuple[int, str, str, str]:
    parts = parameter.split(",")
    if len(parts) != 4:
        raise SwitchBotInvalidParametersException(f"Malformed air conditioner parameter: {parameter}")

    temperature, mode_param, fan_speed_param, power_state = parts
    modes = {value: key for key, value in AIR_CONDITIONER_MODES.items()}
    fan_speeds = {value: key for key, value in AIR_CONDITIONER_FAN_SPEEDS.items()}
    try:
        mode = modes[int(mode_param)]
        fan_speed = fan_speeds[int(fan_speed_param)]
        return int(temperature), mode, fan_speed, require_power_state(power_state)
    except (KeyError, ValueError) as err:
        raise SwitchBotInvalidParametersException(f"Malformed air conditioner parameter: {parameter}") from err

def encode_curtain_position_parameter(position: int, mode: str = "ff", index: int = 0) -> str:
    """Encode the setPosition parameter as "<index>,<mode>,<position>"."""
    if mode not in CURTAIN_MODES:
        raise SwitchBotInvalidParametersException(f"Unknown curtain mode: {mode}")
    if position < 0 or position > 100:
        raise SwitchBotInvalidParametersException("Position must be between 0 and 100")

    return f"{index},{mode},{position}"

def decode_curtain_position_parameter(parameter: str) -> tuple[int, str, int]:
    parts = parameter.split(",")
    if len(parts) != 3 or parts[1] not in CURTAIN_MODES:
        raise SwitchBotInvalidParametersException(f"Malformed curtain parameter: {parameter}")

    try:
        return int(parts[0]), parts[1], int(parts[2])
    except ValueError as err:
        raise SwitchBotInvalidParametersException(f"Malformed curtain parameter: {parameter}") from err

def encode_smart_fan_parameter(power_state: str, mode: int, speed: int, shake_range: int) -> str:
    """Encode the setAllStatus parameter as "<power state>,<mode>,<speed>,<shake range>"."""
    require_power_state(power_state)
    if mode not in SMART_FAN_MODES:
        raise SwitchBotInvalidParametersException(f"Unknown smart fan mode: {mode}")
    if speed not in SMART_FAN_SPEEDS:
        raise SwitchBotInvalidParametersException(f"Unknown smart fan speed: {speed}")
    if shake_range < 0 or shake_range > 120:
        raise SwitchBotInvalidParametersException("Shake range must be between 0 and 120")

    return f"{power_state},{mode},{speed},{shake_range}"

def decode_smart_fan_parameter(parameter: str) -> tuple[str, int, int, int]:
    parts = parameter.split(",")
    if len(parts) != 4:
        raise SwitchBotInvalidParametersException(f"Malformed smart fan parameter: {parameter}")

    try:
        return require_power_state(parts[0]), int(parts[1]), int(parts[2]), int(parts[3])
    except ValueError as err:
        raise SwitchBotInvalidParametersException(f"Malformed smart fan parameter: {parameter}") from err

# Commands shared by every device kind

def turn_on() -> DeviceCommand:
    return DeviceCommand("turnOn")

def turn_off() -> DeviceCommand:
    return DeviceCommand("turnOff")

def custom_button(button_name: str) -> DeviceCommand:
    """Press a user-defined button of a DIY infrared remote."""
    return DeviceCommand(button_name, command_type=COMMAND_TYPE_CUSTOMIZE)

# Infrared remotes

def change_brightness(direction: str) -> DeviceCommand:
    command = lookup({"up": "brightnessUp", "down": "brightnessDown"}, direction, "brightness direction")
    return DeviceCommand(command)

def change_volume(direction: str) -> DeviceCommand:
    command = lookup({"up": "volumeAdd", "down": "volumeSub"}, direction, "volume direction")
    return DeviceCommand(command)

def set_channel(channel: int | str) -> DeviceCommand:
    """Select a channel number, or step with "prev" / "next"."""
    if isinstance(channel, int) and not isinstance(channel, bool):
        return DeviceCommand("SetChannel", channel)

    command = lookup({"prev": "channelSub", "next": "channelAdd"}, channel, "channel")
    return DeviceCommand(command)

def set_air_conditioner(temperature: int, mode: str, fan_speed: str, power_state: str) -> DeviceCommand:
    return DeviceCommand("setAll", encode_air_conditioner_parameter(temperature, mode, fan_speed, power_state))

def transport_control(control: str) -> DeviceCommand:
    return DeviceCommand(lookup(TRANSPORT_CONTROLS, control, "transport control"))

def swing() -> DeviceCommand:
    return DeviceCommand("swing")

def set_timer() -> DeviceCommand:
    return DeviceCommand("timer")

def set_fan_speed(speed: str) -> DeviceCommand:
    return DeviceCommand(lookup(FAN_SPEEDS, speed, "fan speed"))

# Physical devices

def press() -> DeviceCommand:
    return DeviceCommand("press")

def set_curtain_position(position: int, mode: str = "ff", index: int = 0) -> DeviceCommand:
    return DeviceCommand("setPosition", encode_curtain_position_parameter(position, mode, index))

def set_humidifier_mode(mode: str | int) -> DeviceCommand:
    """Select a preset ("auto", "101", "102", "103") or an atomization efficiency of 0-100."""
    if isinstance(mode, int) and not isinstance(mode, bool):
        if mode < 0 or mode > 100:
            raise SwitchBotInvalidParametersException("Atomization efficiency must be between 0 and 100")
        return DeviceCommand("setMode", str(mode))

    if mode not in HUMIDIFIER_PRESET_MODES:
        raise SwitchBotInvalidParametersException(f"Unknown humidifier mode: {mode}")

    return DeviceCommand("setMode", mode)

def set_smart_fan(power_state: str, mode: int, speed: int, shake_range: int) -> DeviceCommand:
    return DeviceCommand("setAllStatus", encode_smart_fan_parameter(power_state, mode, speed, shake_range))
