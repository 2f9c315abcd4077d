API_BASE_URL = "https://api.switch-bot.com"

API_VERSION = "v1.0"

DEVICES_PATH = f"/{API_VERSION}/devices"

DEVICE_STATUS_PATH = f"/{API_VERSION}/devices/{{device_id}}/status"

DEVICE_COMMANDS_PATH = f"/{API_VERSION}/devices/{{device_id}}/commands"

SCENES_PATH = f"/{API_VERSION}/scenes"

SCENE_EXECUTE_PATH = f"/{API_VERSION}/scenes/{{scene_id}}/execute"

STATUS_CODE_SUCCESS = 100

# Failure codes reported in the envelope's statusCode field
STATUS_CODE_MESSAGES = {
    151: "Device type error",
    152: "Device not found",
    160: "Command is not supported",
    161: "Device offline",
    171: "Hub device is offline",
    190: "Device internal error due to device states not synchronized with server",
}

DEFAULT_DEVICE_ERROR_MESSAGE = STATUS_CODE_MESSAGES[190]
