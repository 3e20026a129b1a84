"""Service layer helpers (settings)."""
