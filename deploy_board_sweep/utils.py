"""Status-code and parameter validation helpers."""

from deploy_board_sweep.errors import ValidationError


def is_success_status(status: int) -> bool:
    """Success for list/read calls: any 2xx or 3xx status."""
    return 200 <= status < 400


def is_mutation_success(status: int) -> bool:
    return 200 <= status < 300


def require_int(value, name: str, minimum: int = 1) -> int:
    """Return *value* if it is an integer >= *minimum*.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"Param {name} is not an integer")
    if value < minimum:
        if minimum == 0:
            raise ValidationError(f"Param {name} cannot be negative")
        raise ValidationError(f"Param {name} cannot be less than {minimum}")
    return value


def require_name(value: str, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Param {name} must be a non empty string")
    return value
