"""Adapters to GitHub and webhooks, plus the release-notes pipeline."""
