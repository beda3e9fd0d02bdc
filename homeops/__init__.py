"""homeops: household automation engine (triggers, conditions, actions, run history)."""
