"""Utility helpers shared across SQLFacade."""
