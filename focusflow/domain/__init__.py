"""Domain layer for focusflow.

Pure models and functions with no I/O:

- shared: Result type and base domain event
- types: categorical enums and the ClockTime value object
- task: tasks, subtasks, metrics and display mappings
- focus: focus timer calculations
"""
