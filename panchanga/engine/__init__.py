"""Calendrical engines built on the boundary solvers."""
