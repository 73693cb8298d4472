"""Top-level Excerpter commands (auto-discovered)."""
