"""HR Records package.

This package is organized by resource modules (onboarding, leave_attendance,
payroll) sharing one record service and repository layer, with a thin Flask
controller per resource.
"""
