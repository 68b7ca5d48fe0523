"""Task domain - tasks, subtasks and the metrics derived from them.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - A planned unit of work
    EnhancedSubtask - A step inside a task
    TaskSummary - Progress figures for a task
    Palette - Concrete colors for semantic tones

Metrics Functions:
    phase_stats - Subtask count per learning phase
    completed_subtask_count - Number of completed subtasks
    subtask_completion_percentage - Completion as a whole percentage
    total_estimated_time - Summed estimates in minutes
    summarize_task - All of the above for one task

Display Functions:
    difficulty_color / priority_color / phase_color - Badge colors
    phase_label / difficulty_label - Localized names
    phase_icon - Phase glyph
    format_duration / format_clock_time / format_schedule - Time text

Progress Functions:
    subtask_remaining_time - Focus minutes still needed
    subtask_progress_percentage - Focus progress, 0 to 100
    update_subtask_progress - Credit a finished focus session
    is_subtask_completed - Checked off or fully focused
    subtask_stats - Focus history summary

Domain Events:
    SubtaskAdded, SubtaskRemoved, SubtaskDurationChanged,
    SubtaskToggled, TaskToggled, SubtaskProgressRecorded
"""

from .display import (
    LIGHT_PALETTE,
    PENDING_ICON,
    PHASE_COLORS,
    PHASE_ICONS,
    Palette,
    difficulty_color,
    difficulty_label,
    difficulty_tone,
    format_clock_time,
    format_duration,
    format_schedule,
    phase_color,
    phase_icon,
    phase_label,
    priority_color,
    priority_tone,
    scheduled_window,
)
from .events import (
    SubtaskAdded,
    SubtaskDurationChanged,
    SubtaskProgressRecorded,
    SubtaskRemoved,
    SubtaskToggled,
    TaskToggled,
)
from .metrics import (
    COUNTED_PHASES,
    TaskSummary,
    completed_subtask_count,
    estimated_hours,
    phase_stats,
    round_half_up,
    subtask_completion_percentage,
    summarize_task,
    total_estimated_time,
)
from .models import DEFAULT_SUBTASK_MINUTES, EnhancedSubtask, SessionRecord, Task
from .progress import (
    DEFAULT_PROGRESS_MINUTES,
    SubtaskStats,
    is_subtask_completed,
    subtask_original_duration,
    subtask_progress_percentage,
    subtask_remaining_time,
    subtask_stats,
    subtask_total_duration,
    update_subtask_progress,
)

__all__ = [
    # Models
    "Task",
    "EnhancedSubtask",
    "SessionRecord",
    "DEFAULT_SUBTASK_MINUTES",
    # Metrics
    "COUNTED_PHASES",
    "TaskSummary",
    "phase_stats",
    "completed_subtask_count",
    "subtask_completion_percentage",
    "total_estimated_time",
    "estimated_hours",
    "summarize_task",
    "round_half_up",
    # Progress
    "DEFAULT_PROGRESS_MINUTES",
    "SubtaskStats",
    "subtask_total_duration",
    "subtask_original_duration",
    "subtask_remaining_time",
    "subtask_progress_percentage",
    "is_subtask_completed",
    "update_subtask_progress",
    "subtask_stats",
    # Display
    "Palette",
    "LIGHT_PALETTE",
    "PHASE_COLORS",
    "PHASE_ICONS",
    "PENDING_ICON",
    "difficulty_tone",
    "priority_tone",
    "difficulty_color",
    "priority_color",
    "phase_color",
    "phase_label",
    "difficulty_label",
    "phase_icon",
    "format_duration",
    "format_clock_time",
    "format_schedule",
    "scheduled_window",
    # Events
    "SubtaskAdded",
    "SubtaskRemoved",
    "SubtaskDurationChanged",
    "SubtaskToggled",
    "TaskToggled",
    "SubtaskProgressRecorded",
]
