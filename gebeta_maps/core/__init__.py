"""Configuration, validation, logging and the error taxonomy."""
