"""Data models for pom-report."""
