from enum import Enum
from http import HTTPStatus


class AppHealthStatus(Enum):
    UP = HTTPStatus.OK
    DOWN = HTTPStatus.SERVICE_UNAVAILABLE

    def __init__(self, http_status: HTTPStatus):
        self.http_status = http_status


class ComponentHealthStatus(Enum):
    UP = "UP"
    DOWN = "DOWN"
