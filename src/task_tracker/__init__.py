"""Employee task tracker.

This package is organized by feature modules (employees, tasks, dashboard)
with a thin Flask controller layer on top of service/repository layers.
"""
