"""Test suite for sparkfx."""
