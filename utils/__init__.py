"""Calendar, math, validation and logging helpers."""
