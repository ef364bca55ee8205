"""Lab staff attendance & payroll deduction engine.

This package is organized by feature modules (settings, attendance,
deductions, leaves, payroll, ...) with a thin Flask controller layer over
service/repository layers.
"""
