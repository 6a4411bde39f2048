"""Tests for Chatra Shayak."""
