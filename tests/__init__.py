"""Tests for the percolation_fire package."""
