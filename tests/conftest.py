"""Shared test fixtures for the SwitchBot client tests."""
from __future__ import annotations

import copy
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from py_switchbot.client import SwitchBotAPIClient

ACCESS_TOKEN = "fake_token"

DEVICE_LIST_BODY = {
    "deviceList": [
        {
            "deviceId": "500291B269BE",
            "deviceName": "Living Room Humidifier",
            "deviceType": "Humidifier",
            "enableCloudService": True,
            "hubDeviceId": "000000000000",
        },
        {
            "deviceId": "E2F6032048AB",
            "deviceName": "Bedroom Curtain",
            "deviceType": "Curtain",
            "enableCloudService": True,
            "hubDeviceId": "FA7310762361",
            "curtainDevicesIds": ["E2F6032048AB", "CD0A9C3A7E5D"],
            "calibrate": True,
            "group": True,
            "master": True,
            "openDirection": "left",
        },
    ],
    "infraredRemoteList": [
        {
            "deviceId": "02-202008110034-13",
            "deviceName": "Living Room TV",
            "remoteType": "TV",
            "hubDeviceId": "FA7310762361",
        },
        {
            "deviceId": "02-202008110034-14",
            "deviceName": "Bedroom TV",
            "remoteType": "DIY TV",
            "hubDeviceId": "FA7310762361",
        },
        {
            "deviceId": "02-202011051830-22",
            "deviceName": "Office Air Conditioner",
            "remoteType": "Air Conditioner",
            "hubDeviceId": "FA7310762361",
        },
    ],
}

METER_STATUS_BODY = {
    "deviceId": "C271111EC0AB",
    "deviceType": "Meter",
    "hubDeviceId": "FA7310762361",
    "humidity": 52,
    "temperature": 26.1,
}

SCENE_LIST_BODY = [
    {"sceneId": "T02-20200804130110", "sceneName": "Close Office Devices"},
    {"sceneId": "T02-202009221414-48924101", "sceneName": "Set Office AC to 25"},
    {"sceneId": "T02-202011051830-39363561", "sceneName": "Set Bedroom to 24"},
    {"sceneId": "T02-202011051831-82928991", "sceneName": "Turn off home devices"},
    {"sceneId": "T02-202011062059-26364981", "sceneName": "Set Bedroom to 26 degree"},
]


def success(body: Any) -> dict[str, Any]:
    """Wrap a body in a success envelope."""
    return {"statusCode": 100, "body": body, "message": "success"}


def make_response(payload: Any, status: int = 200) -> MagicMock:
    """Create a mock aiohttp response returning payload as JSON."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=json.dumps(payload) if payload is not None else "")
    response.json = AsyncMock(return_value=payload)
    return response


@pytest.fixture
def mock_session():
    """Create a mock aiohttp session."""
    session = MagicMock(spec=aiohttp.ClientSession)
    session.request = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def client(mock_session):
    """Create an API client with mock session."""
    return SwitchBotAPIClient(ACCESS_TOKEN, session=mock_session)


@pytest.fixture
def respond(mock_session):
    """Queue the payload the mock session returns for the next request."""

    def _respond(payload: Any, status: int = 200) -> MagicMock:
        response = make_response(payload, status)
        mock_session.request.return_value = response
        return response

    return _respond


@pytest.fixture
def device_list_body():
    """Documented device list body."""
    return copy.deepcopy(DEVICE_LIST_BODY)


@pytest.fixture
def meter_status_body():
    """Documented Meter status body."""
    return copy.deepcopy(METER_STATUS_BODY)


@pytest.fixture
def scene_list_body():
    """Documented scene list body."""
    return copy.deepcopy(SCENE_LIST_BODY)


@pytest.fixture
def envelope():
    """Return the success envelope builder."""
    return success
