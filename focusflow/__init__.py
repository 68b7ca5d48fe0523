"""focusflow - task, subtask and focus-session core for a productivity app."""

__version__ = "0.1.0"
