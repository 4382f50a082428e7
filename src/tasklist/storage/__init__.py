"""Key/value backends holding the persisted task list blob."""
