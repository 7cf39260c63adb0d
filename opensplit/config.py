"""Settlement configuration.

Defaults keep the naive result on ties and round to cents. Both can be
overridden from the environment with ``SettlementConfig.from_env()``.
"""

import os

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError

DECIMALS_ENV = "OPENSPLIT_DECIMALS"
PREFER_GREEDY_ENV = "OPENSPLIT_PREFER_GREEDY_ON_TIE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class SettlementConfig(BaseModel):
    decimals: int = Field(2, ge=0, le=6, description="Currency minor unit exchanges are rounded to")
    prefer_greedy_on_tie: bool = Field(
        False, description="Pick the greedy result when both algorithms need as many exchanges"
    )

    @classmethod
    def from_env(cls, environ=None) -> "SettlementConfig":
        environ = os.environ if environ is None else environ
        values = {}

        raw_decimals = environ.get(DECIMALS_ENV)
        if raw_decimals is not None:
            try:
                values["decimals"] = int(raw_decimals)
            except ValueError:
                raise ConfigError(f"{DECIMALS_ENV} must be an integer, got {raw_decimals!r}")

        raw_prefer = environ.get(PREFER_GREEDY_ENV)
        if raw_prefer is not None:
            flag = raw_prefer.strip().lower()
            if flag in _TRUE_VALUES:
                values["prefer_greedy_on_tie"] = True
            elif flag in _FALSE_VALUES:
                values["prefer_greedy_on_tie"] = False
            else:
                raise ConfigError(f"{PREFER_GREEDY_ENV} must be a boolean, got {raw_prefer!r}")

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e
