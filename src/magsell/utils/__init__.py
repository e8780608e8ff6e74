"""Utility modules for MagSell."""
