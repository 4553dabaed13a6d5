from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _scalar_text(value: Any) -> str:
    """
    Accept a YAML scalar as the text it was written with.

    The loader leaves plain scalars unresolved, so `0x1F90`, `0755` and `yes` arrive
    here as strings. Null becomes the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValueError(f"expected a scalar value, got {type(value).__name__}")


def _none_as_empty(factory: type) -> BeforeValidator:
    def _validate(value: Any) -> Any:
        if value is None:
            return factory()
        return value

    return BeforeValidator(_validate)


def _null_entries_as_zero(value: Any) -> Any:
    # A null list entry decodes to a zero-valued element, not an error.
    if value is None:
        return ()
    if isinstance(value, list):
        return [{} if item is None else item for item in value]
    return value


ScalarText = Annotated[str, BeforeValidator(_scalar_text)]
StringMap = Annotated[dict[ScalarText, ScalarText], _none_as_empty(dict)]
_Entries = BeforeValidator(_null_entries_as_zero)


class Middleware(BaseModel):
    """An interceptor resolved by `type` against a registry owned by the consumer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: ScalarText = ""
    config: StringMap = Field(default_factory=dict)


class Handler(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    path: ScalarText = ""
    type: ScalarText = ""
    config: StringMap = Field(default_factory=dict)


class Router(BaseModel):
    """
    A prefix-scoped routing rule.

    Prefixes are not required to be unique; ordering across routers is kept as written
    so a consumer can apply first-match semantics.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    prefix: ScalarText = ""
    middlewares: Annotated[tuple[Middleware, ...], _Entries] = ()
    handlers: Annotated[tuple[Handler, ...], _Entries] = ()


class Server(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    port: ScalarText = ""
    routers: Annotated[tuple[Router, ...], _Entries] = ()


class Config(BaseModel):
    """
    Root of a loaded server configuration.

    A new tree is built for every load; nothing is shared between calls.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    server: Annotated[Server, _none_as_empty(Server)] = Field(default_factory=Server)
