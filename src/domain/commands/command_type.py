from enum import Enum


class CommandType(str, Enum):
    LIGHT_ON = "LIGHT_ON"
    LIGHT_OFF = "LIGHT_OFF"
    GET_STATUS = "GET_STATUS"
