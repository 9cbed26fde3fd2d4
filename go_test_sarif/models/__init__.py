"""Data models for test events and SARIF reports."""
