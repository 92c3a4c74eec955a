"""Runtime configuration for the workout composition core."""
