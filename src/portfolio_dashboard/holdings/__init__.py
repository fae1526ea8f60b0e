"""Holdings file loading."""
