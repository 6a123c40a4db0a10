"""Mailjet send API adapter."""
