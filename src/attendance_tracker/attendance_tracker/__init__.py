"""Attendance Tracker package.

Feature modules (roster, attendance, home) each pair a thin Flask
controller with service and storage layers wired in ``container``.
"""
