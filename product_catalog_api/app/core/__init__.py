"""Configuration, logging, error handling and storage."""
