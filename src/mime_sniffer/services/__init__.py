"""I/O collaborators that supply leading bytes."""
