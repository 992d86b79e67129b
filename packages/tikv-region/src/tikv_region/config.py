"""Environment-based configuration for region descriptors."""

from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings

from tikv_region.models import CommandPri, IsolationLevel, KeyMode

_ENUM_FIELDS = {
    "isolation_level": IsolationLevel,
    "command_priority": CommandPri,
}


class Settings(BaseSettings):
    """Defaults applied when building region descriptors.

    All settings can be overridden via environment variables with
    TIKV_REGION_ prefix. For example:
        TIKV_REGION_KV_MODE=raw
        TIKV_REGION_ISOLATION_LEVEL=RC
        TIKV_REGION_COMMAND_PRIORITY=high
    """

    # Key mode of the cluster's regions
    kv_mode: KeyMode = KeyMode.TXN

    # Request addressing
    isolation_level: IsolationLevel = IsolationLevel.SI
    command_priority: CommandPri = CommandPri.NORMAL

    model_config = {"env_prefix": "TIKV_REGION_"}

    @field_validator("kv_mode", mode="before")
    @classmethod
    def _parse_kv_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            return KeyMode.parse(value)
        return value

    @field_validator("isolation_level", "command_priority", mode="before")
    @classmethod
    def _parse_enum(cls, value: Any, info: ValidationInfo) -> Any:
        # Accept enum names ("rc", "High") as well as wire numbers ("1")
        if not isinstance(value, str):
            return value
        enum_cls = _ENUM_FIELDS[info.field_name]
        text = value.strip()
        if text.isdigit():
            return enum_cls(int(text))
        try:
            return enum_cls[text.upper()]
        except KeyError:
            raise ValueError(
                f"unknown {info.field_name} {value!r}, "
                f"expected one of {', '.join(enum_cls.__members__)}"
            ) from None
