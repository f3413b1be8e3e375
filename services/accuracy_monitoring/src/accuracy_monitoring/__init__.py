"""Validates race predictions against results and records their accuracy."""
