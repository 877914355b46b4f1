class ClimaBotError(Exception):
    """Base exception for all Clima Bot errors."""

    pass
