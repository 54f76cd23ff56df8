"""Mess Attendance package.

Organized by feature modules (employees, attendance, analytics, settings)
with a thin Flask controller layer over service/repository layers.
"""
