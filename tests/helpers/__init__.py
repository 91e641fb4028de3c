"""Shared grammars and domain nodes for the test suite."""
