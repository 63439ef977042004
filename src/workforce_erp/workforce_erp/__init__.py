"""Workforce ERP package.

Feature modules (employees, worklogs, payroll, finance, leave) each keep a
plain data model, a repository interface, storage implementations and a
service layer. Flask controllers are a thin JSON layer on top.
"""
