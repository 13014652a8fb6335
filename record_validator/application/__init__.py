"""Application layer: orchestration of validation runs."""
