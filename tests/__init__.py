"""Test package for timever."""
