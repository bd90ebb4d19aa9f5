"""Renderers that turn PlantUML text into images."""
