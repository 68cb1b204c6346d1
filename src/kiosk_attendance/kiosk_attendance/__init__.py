"""Kiosk Attendance package.

This package is organized by feature modules (employees, attendance, stats,
export, admin) with a thin Flask controller layer over service/repository
layers.
"""
