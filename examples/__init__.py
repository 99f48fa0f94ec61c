"""Runnable demos for the checkout package."""
