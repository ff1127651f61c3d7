"""School Attendance package.

Feature modules (schools, users, attendance, reports) each carry a model,
a repository interface with its MySQL implementation, a service and a thin
Flask controller.
"""
