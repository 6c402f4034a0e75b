"""Library catalogue service."""
