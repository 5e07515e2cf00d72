"""Shared domain package for the user management API."""
