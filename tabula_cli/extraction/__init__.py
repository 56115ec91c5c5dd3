"""Plan construction, per-page dispatch and batch orchestration."""
