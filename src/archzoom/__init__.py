"""archzoom — multi-level PlantUML architecture diagrams from collected metadata."""
