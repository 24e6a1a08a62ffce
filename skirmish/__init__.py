"""Units, move commands, rectangular formations and game sessions for deterministic real-time strategy simulations."""

__version__ = "0.1.0"
__all__ = ["commands", "formation", "planner", "session", "units"]