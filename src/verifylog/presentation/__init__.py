"""Presentation layer: public API and pytest plugin."""
