from typing import Any, Mapping

import aiohttp
import asyncio
import logging

from .commands import DeviceCommand
from .endpoints import (
    API_BASE_URL,
    DEFAULT_DEVICE_ERROR_MESSAGE,
    DEVICE_COMMANDS_PATH,
    DEVICE_STATUS_PATH,
    DEVICES_PATH,
    SCENE_EXECUTE_PATH,
    SCENES_PATH,
    STATUS_CODE_MESSAGES,
    STATUS_CODE_SUCCESS
)
from .exceptions import (
    SwitchBotAuthException,
    SwitchBotDeviceException,
    SwitchBotTransportException,
    SwitchBotUnknownException
)
from .models import (
    DEVICE_STATUS_TYPES,
    CommandResponse,
    Curtain,
    Device,
    DeviceList,
    DeviceStatus,
    DeviceType,
    GenericStatus,
    InfraredRemote,
    Scene,
    WireModel
)

JSON_CONTENT_TYPE = "application/json"

POST_CONTENT_TYPE = "application/json; charset=utf8"

def unwrap_envelope(envelope: dict[str, Any]) -> Any:
    """Return the body of a success envelope, or raise the matching exception.

    An envelope without a statusCode is the API's {"message": "Unauthorized"}
    reply. Any statusCode other than 100 is a device or command failure.
    """
    if "statusCode" not in envelope:
        raise SwitchBotAuthException()

    status_code = envelope["statusCode"]
    if status_code != STATUS_CODE_SUCCESS:
        message = STATUS_CODE_MESSAGES.get(status_code, DEFAULT_DEVICE_ERROR_MESSAGE)
        raise SwitchBotDeviceException(f"{message} (status code: {status_code})", status_code=status_code)

    if "body" not in envelope:
        raise SwitchBotUnknownException("Success response is missing its body")

    return envelope["body"]

def map_dict_to_model(model_type: type[WireModel], data: Any, **overrides: Any) -> Any:
    if not isinstance(data, dict):
        raise SwitchBotUnknownException(f"Expected an object for {model_type.__name__}")

    wire_keys = model_type.wire_names.values()
    if not all(key in data for key in wire_keys):
        raise SwitchBotUnknownException(f"Missing required keys for {model_type.__name__}")

    values = {name: data[key] for name, key in model_type.wire_names.items()}
    values.update(overrides)
    extra = {key: value for key, value in data.items() if key not in wire_keys}

    return model_type(**values, extra=extra)

def map_device_type_str_to_device_type(device_type_str: str | None) -> DeviceType | str:
    if device_type_str is None:
        raise SwitchBotUnknownException("Failed to determine device type")

    try:
        return DeviceType(device_type_str)
    except ValueError:
        # Device kinds newer than DeviceType keep their raw type string
        return device_type_str

def map_device_dict_to_device(device_dict: dict[str, Any]) -> Device | Curtain:
    device_type = map_device_type_str_to_device_type(device_dict.get("deviceType"))
    model_type = Curtain if device_type == DeviceType.CURTAIN else Device

    return map_dict_to_model(model_type, device_dict, device_type=device_type)

def map_infrared_remote_dict_to_infrared_remote(remote_dict: dict[str, Any]) -> InfraredRemote:
    return map_dict_to_model(InfraredRemote, remote_dict)

def map_device_list_dict_to_device_list(device_list_dict: dict[str, Any]) -> DeviceList:
    if not isinstance(device_list_dict, dict):
        raise SwitchBotUnknownException("Failed to retrieve devices")

    return map_dict_to_model(
        DeviceList,
        device_list_dict,
        device_list=list(map(map_device_dict_to_device, device_list_dict.get("deviceList", []))),
        infrared_remote_list=list(map(map_infrared_remote_dict_to_infrared_remote, device_list_dict.get("infraredRemoteList", [])))
    )

def map_device_status_dict_to_device_status(status_dict: dict[str, Any]) -> DeviceStatus:
    if not isinstance(status_dict, dict):
        raise SwitchBotUnknownException("Failed to retrieve device status")

    device_type = map_device_type_str_to_device_type(status_dict.get("deviceType"))

    status_type = DEVICE_STATUS_TYPES.get(device_type, GenericStatus)

    return map_dict_to_model(status_type, status_dict, device_type=device_type)

def map_scene_dict_to_scene(scene_dict: dict[str, Any]) -> Scene:
    return map_dict_to_model(Scene, scene_dict)

class SwitchBotAPIClient:
    def __init__(self, token: str, session: aiohttp.ClientSession = None, base_url: str = API_BASE_URL):
        self.token = token
        self.base_url = base_url

        if session is None:
            self.session = aiohttp.ClientSession()
            self.owns_session = True
        else:
            self.session = session
            self.owns_session = False

        self.logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "SwitchBotAPIClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def __send_request(self, method: str, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        self.logger.debug(f"Sending request, method: {method}, path: {path}, body: {body}")

        headers = {
            "Authorization": self.token,
            "Content-Type": POST_CONTENT_TYPE if method == "POST" else JSON_CONTENT_TYPE
        }

        try:
            response = await self.session.request(
                method=method,
                url=self.base_url + path,
                headers=headers,
                json=body
            )
            self.logger.debug(f"Received response, status code: {response.status}")
            self.logger.debug(f"Response body: {await response.text()}")
        except asyncio.TimeoutError as err:
            raise SwitchBotTransportException("Request timed out", error=err) from err
        except aiohttp.ClientError as err:
            self.logger.exception("Request failed", exc_info=err)
            raise SwitchBotTransportException("Request failed", error=err) from err

        try:
            response_json = await response.json(content_type=None)
        except ValueError:
            response_json = None

        if response.status < 200 or response.status >= 300:
            # Error replies that still carry an envelope are decoded like any other
            if isinstance(response_json, dict):
                if response_json.get("statusCode", STATUS_CODE_SUCCESS) != STATUS_CODE_SUCCESS:
                    unwrap_envelope(response_json)
                if "statusCode" not in response_json and response.status in (401, 403):
                    raise SwitchBotAuthException()
            raise SwitchBotTransportException(
                f"Something went wrong (HTTP status code: {response.status})",
                http_status=response.status
            )

        if not isinstance(response_json, dict):
            raise SwitchBotTransportException("Response is not a JSON object", http_status=response.status)

        return response_json

    async def get_device_list(self) -> DeviceList:
        """Get the physical devices and infrared remotes registered to the account."""
        response = await self.__send_request("GET", DEVICES_PATH)

        return map_device_list_dict_to_device_list(unwrap_envelope(response))

    async def get_device_status(self, device_id: str) -> DeviceStatus:
        """Get the status of a physical device.

        The returned variant is chosen by the deviceType the server reports.
        """
        response = await self.__send_request("GET", DEVICE_STATUS_PATH.format(device_id=device_id))

        return map_device_status_dict_to_device_status(unwrap_envelope(response))

    async def send_control_command(self, device_id: str, command: DeviceCommand | Mapping[str, Any]) -> CommandResponse:
        """Send a command to a physical device or an infrared remote."""
        payload = command.to_dict() if isinstance(command, DeviceCommand) else dict(command)

        response = await self.__send_request("POST", DEVICE_COMMANDS_PATH.format(device_id=device_id), payload)

        return unwrap_envelope(response)

    async def get_scene_list(self) -> list[Scene]:
        response = await self.__send_request("GET", SCENES_PATH)

        scene_dicts = unwrap_envelope(response)
        if not isinstance(scene_dicts, list):
            raise SwitchBotUnknownException("Failed to retrieve scenes")

        return list(map(map_scene_dict_to_scene, scene_dicts))

    async def execute_scene(self, scene_id: str) -> CommandResponse:
        response = await self.__send_request("POST", SCENE_EXECUTE_PATH.format(scene_id=scene_id))

        return unwrap_envelope(response)

    async def close(self):
        if self.owns_session:
            await self.session.close()
