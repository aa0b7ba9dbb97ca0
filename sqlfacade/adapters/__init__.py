"""Engine adapters for SQLFacade."""
