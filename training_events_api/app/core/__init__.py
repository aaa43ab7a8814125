"""Configuration, storage, logging and error handling shared by the app."""
