"""Output format chosen with the root ``--display`` option."""

DISPLAY_FORMATS = ("yaml", "json")

_display_format = "yaml"


def set_display_format(value: str) -> None:
    """Record the format for the command about to run.

    Raises:
        ValueError: If the value is not one of DISPLAY_FORMATS
    """
    global _display_format
    if value not in DISPLAY_FORMATS:
        raise ValueError(f"--display must be 'json' or 'yaml', got '{value}'")
    _display_format = value


def get_display_format() -> str:
    return _display_format
