"""Test suite for fileshare."""
