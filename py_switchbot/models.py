from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar

class DeviceType(Enum):
    HUB = "Hub"
    HUB_MINI = "Hub Mini"
    HUB_PLUS = "Hub Plus"
    BOT = "Bot"
    CURTAIN = "Curtain"
    PLUG = "Plug"
    METER = "Meter"
    HUMIDIFIER = "Humidifier"
    SMART_FAN = "Smart Fan"

class RemoteType(Enum):
    AIR_CONDITIONER = "Air Conditioner"
    TV = "TV"
    LIGHT = "Light"
    IPTV_STREAMER = "IPTV/Streamer"
    SET_TOP_BOX = "Set Top Box"
    DVD = "DVD"
    FAN = "Fan"
    PROJECTOR = "Projector"
    CAMERA = "Camera"
    AIR_PURIFIER = "Air Purifier"
    SPEAKER = "Speaker"
    WATER_HEATER = "Water Heater"
    VACUUM_CLEANER = "Vacuum Cleaner"
    OTHERS = "Others"

class WireModel:
    """Mixin for models decoded from a JSON payload.

    `wire_names` maps each dataclass field to its camelCase key. Keys of the
    payload that have no field are kept in `extra` so that `to_dict()`
    reproduces the payload exactly.
    """

    wire_names: ClassVar[dict[str, str]] = {}

    def to_dict(self) -> dict[str, Any]:
        data = {}
        for model_field in fields(self):
            if model_field.name == "extra":
                continue
            value = getattr(self, model_field.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, list):
                value = [item.to_dict() if isinstance(item, WireModel) else item for item in value]
            data[self.wire_names[model_field.name]] = value
        data.update(getattr(self, "extra", {}))
        return data

@dataclass(frozen=True)
class Device(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        "device_id": "deviceId",
        "device_name": "deviceName",
        "device_type": "deviceType",
        "enable_cloud_service": "enableCloudService",
        "hub_device_id": "hubDeviceId",
    }

    device_id: str
    device_name: str
    device_type: DeviceType | str
    enable_cloud_service: bool
    hub_device_id: str
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class Curtain(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        **Device.wire_names,
        "curtain_devices_ids": "curtainDevicesIds",
        "calibrate": "calibrate",
        "group": "group",
        "master": "master",
        "open_direction": "openDirection",
    }

    device_id: str
    device_name: str
    device_type: DeviceType | str
    enable_cloud_service: bool
    hub_device_id: str
    curtain_devices_ids: list[str]
    calibrate: bool
    group: bool
    master: bool
    open_direction: str
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class InfraredRemote(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        "device_id": "deviceId",
        "device_name": "deviceName",
        "remote_type": "remoteType",
        "hub_device_id": "hubDeviceId",
    }

    device_id: str
    device_name: str
    # DIY profiles report values such as "DIY TV", which RemoteType does not cover
    remote_type: str
    hub_device_id: str
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def remote_type_enum(self) -> RemoteType | None:
        """The remote type as a RemoteType, or None for DIY and unlisted types."""
        try:
            return RemoteType(self.remote_type)
        except ValueError:
            return None

@dataclass(frozen=True)
class DeviceList(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        "device_list": "deviceList",
        "infrared_remote_list": "infraredRemoteList",
    }

    device_list: list[Device | Curtain]
    infrared_remote_list: list[InfraredRemote]
    extra: dict[str, Any] = field(default_factory=dict)

STATUS_BASE_WIRE_NAMES = {
    "device_id": "deviceId",
    "device_type": "deviceType",
    "hub_device_id": "hubDeviceId",
}

@dataclass(frozen=True)
class GenericStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = STATUS_BASE_WIRE_NAMES

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class BotStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {**STATUS_BASE_WIRE_NAMES, "power": "power"}

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    power: str
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class PlugStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {**STATUS_BASE_WIRE_NAMES, "power": "power"}

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    power: str
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class HumidifierStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        **STATUS_BASE_WIRE_NAMES,
        "power": "power",
        "humidity": "humidity",
        "temperature": "temperature",
        "nebulization_efficiency": "nebulizationEfficiency",
        "auto": "auto",
        "child_lock": "childLock",
        "sound": "sound",
    }

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    power: str
    humidity: int
    temperature: float
    nebulization_efficiency: int
    auto: bool
    child_lock: bool
    sound: bool
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class MeterStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        **STATUS_BASE_WIRE_NAMES,
        "humidity": "humidity",
        "temperature": "temperature",
    }

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    humidity: int
    temperature: float
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class CurtainStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        **STATUS_BASE_WIRE_NAMES,
        "calibrate": "calibrate",
        "group": "group",
        "moving": "moving",
        "slide_position": "slidePosition",
    }

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    calibrate: bool
    group: bool
    moving: bool
    slide_position: int
    extra: dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class SmartFanStatus(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        **STATUS_BASE_WIRE_NAMES,
        "mode": "mode",
        "speed": "speed",
        "shaking": "shaking",
        "shake_center": "shakeCenter",
        "shake_range": "shakeRange",
    }

    device_id: str
    device_type: DeviceType | str
    hub_device_id: str
    mode: int
    speed: int
    shaking: bool
    shake_center: int
    shake_range: int
    extra: dict[str, Any] = field(default_factory=dict)

DeviceStatus = GenericStatus | BotStatus | PlugStatus | HumidifierStatus | MeterStatus | CurtainStatus | SmartFanStatus

# Status variant for each server-reported deviceType
DEVICE_STATUS_TYPES: dict[DeviceType, type] = {
    DeviceType.HUB: GenericStatus,
    DeviceType.HUB_MINI: GenericStatus,
    DeviceType.HUB_PLUS: GenericStatus,
    DeviceType.BOT: BotStatus,
    DeviceType.PLUG: PlugStatus,
    DeviceType.HUMIDIFIER: HumidifierStatus,
    DeviceType.METER: MeterStatus,
    DeviceType.CURTAIN: CurtainStatus,
    DeviceType.SMART_FAN: SmartFanStatus,
}

@dataclass(frozen=True)
class Scene(WireModel):
    wire_names: ClassVar[dict[str, str]] = {
        "scene_id": "sceneId",
        "scene_name": "sceneName",
    }

    scene_id: str
    scene_name: str
    extra: dict[str, Any] = field(default_factory=dict)

CommandResponse = dict[str, Any]
