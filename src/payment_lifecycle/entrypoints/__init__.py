"""Entrypoints layer - Process bootstrap.

Entrypoints assemble the application from settings. HTTP or CLI
delivery layers call into the PaymentService built here.
"""
