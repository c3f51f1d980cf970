from pydantic import ValidationError


def validation_detail(error: ValidationError, prefix: str = "") -> str:
    """Render the first pydantic error as ``field: message``."""
    error_list = error.errors() or [{"msg": str(error), "loc": ()}]
    first = error_list[0]
    error_msg = first.get("msg", str(error))
    loc = first.get("loc", ())
    parts = [prefix] if prefix else []
    parts.extend(str(x) for x in loc)
    field = ".".join(parts)
    return f"{field}: {error_msg}" if field else error_msg
