
class ControllerError(ValueError):
    """Base class for errors raised by the PID controller."""

class ConfigurationError(ControllerError):
    """Invalid gain, limit or time step passed at construction."""

class ValidationError(ControllerError):
    """Non-numeric or non-finite value passed to set_target/update."""
