"""Presentation layer: reporters for builder discovery."""
