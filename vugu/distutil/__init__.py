"""Helpers for copying static files and running build commands for a distribution directory."""