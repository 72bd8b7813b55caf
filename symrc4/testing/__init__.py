"""Testing helpers for symrc4 (requires the ``test`` extra)."""
