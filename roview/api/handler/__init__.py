"""Document handlers package."""

from ..config.HandlerConfig import HandlerConfig
from ._BaseHandler import BaseHandler
from .TObjectHandler import TObjectHandler

_HANDLERS: dict[str, HandlerConfig] = {
    "tobject": HandlerConfig(strict=False),
    "strict": HandlerConfig(strict=True),
}


def get_handler(handler_name: str | None = None) -> BaseHandler:
    """Get a handler instance by name, defaulting to the lenient one."""
    if handler_name is None:
        handler_name = "tobject"
    config = _HANDLERS.get(handler_name)
    if config is None:
        raise ValueError(f"Unknown handler: {handler_name} (supported: {list(_HANDLERS)})")
    return TObjectHandler(config.model_copy())


__all__ = ["BaseHandler", "TObjectHandler", "get_handler"]
