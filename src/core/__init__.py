"""Core adapter objects: models, properties, devices and the HTTP service."""
