from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from chronokit.application.plugins import install_methods
from chronokit.ports.plugins import InstantCapabilities

_CLOCK = r"^([01]\d|2[0-3]):[0-5]\d$"


class GreetingConfigs(BaseModel):
    """Period end times (inclusive, ``HH:MM``) and the message for each period."""

    model_config = ConfigDict(frozen=True)

    morning_ends: str = Field(default="11:59", pattern=_CLOCK)
    noon_ends: str = Field(default="12:59", pattern=_CLOCK)
    afternoon_ends: str = Field(default="17:59", pattern=_CLOCK)
    evening_ends: str = Field(default="23:59", pattern=_CLOCK)
    midnight_ends: str = Field(default="02:59", pattern=_CLOCK)
    append_to_msg: str = ""
    prepend_to_msg: str = ""
    morning_message: str = "Good Morning!"
    noon_message: str = "Good Noon!"
    afternoon_message: str = "Good Afternoon!"
    evening_message: str = "Good Evening!"
    midnight_message: str = "Hello, Night Owl!"
    default_message: str = "Greetings!"


def _minutes(clock: str) -> int:
    hour, minute = clock.split(":")
    return int(hour) * 60 + int(minute)


def greet(clock: str, configs: Optional[GreetingConfigs] = None) -> str:
    """Greeting for a ``HH:MM`` wall-clock time."""
    configs = configs or GreetingConfigs()
    current = _minutes(clock)
    if current <= _minutes(configs.midnight_ends):
        message = configs.midnight_message
    elif current <= _minutes(configs.morning_ends):
        message = configs.morning_message
    elif current <= _minutes(configs.noon_ends):
        message = configs.noon_message
    elif current <= _minutes(configs.afternoon_ends):
        message = configs.afternoon_message
    elif current <= _minutes(configs.evening_ends):
        message = configs.evening_message
    else:
        message = configs.default_message
    return f"{configs.prepend_to_msg}{message}{configs.append_to_msg}"


def get_greeting(caps: InstantCapabilities, instant: Any, configs: Optional[GreetingConfigs] = None, **kwargs) -> str:
    return greet(instant.format("HH:mm"), configs or GreetingConfigs(**kwargs))


def greeting_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, get_greeting=get_greeting)
