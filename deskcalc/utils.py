import enum
import os


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_value(value: float) -> str:
    return f"{value:g}"


def has_env(varname: str, value: str = "true") -> bool:
    """
    Check environment variable is set.
    """
    return os.environ.get(varname, "").lower() == value
