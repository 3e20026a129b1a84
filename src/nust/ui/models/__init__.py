"""Data structures shared by the UI state machine and its widgets."""
