"""Tests for the profile switcher."""
