"""Shared utilities: events and logging.

Author: Michael Economou
Date: 2026-10-19
"""
