"""Job scheduling on top of longest paths."""

from .cpm import CriticalPathSchedule, Job, parse_jobs, schedule_from_string

__all__ = ["Job", "parse_jobs", "CriticalPathSchedule", "schedule_from_string"]
