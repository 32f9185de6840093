"""Travel insights cache implementations."""
