"""Workshop Payroll package.

Monthly salary and attendance reconciliation for the repair-shop back office,
organized by feature modules (workers, shifts, holidays, attendance, payroll)
with a thin Flask controller layer over service/repository layers.
"""
