"""Top-level lintdex commands (auto-discovered)."""
