"""Smart Attendance package.

This package is organized by feature modules (users, dashboard, students,
courses, attendance, health) with a thin Flask controller layer over small
service/repository layers, plus a ``web`` module holding the browser client.
"""
