"""Configuration, logging, database bootstrap, security and error kinds."""
