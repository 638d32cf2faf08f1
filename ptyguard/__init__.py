"""Trust-boundary guards for a host process brokering terminal sessions."""

__version__ = "0.1.0"
