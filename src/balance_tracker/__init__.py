"""Classroom balance tracker service."""
