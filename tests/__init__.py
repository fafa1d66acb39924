"""Test suite for the doomfire package."""
