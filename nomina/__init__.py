"""Payroll records for employees, kept in a linked list and stored as text or binary files."""

__version__ = "0.1.0"