"""Application shell and terminal rendering for the storerate client."""
