"""School register package.

In-memory attendance, notes and students with window-based statistics,
organized by feature modules (attendance, notes, students, dashboard, ...)
with a thin Flask controller layer over service/store layers.
"""
