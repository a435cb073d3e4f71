"""Work Tracker package.

Employees submit daily page-count reports (or mark leave); admins review,
edit, aggregate and export them. Organized by feature modules (users,
reports, audit, summaries, exports) with a thin Flask controller layer on
top of service/repository layers.
"""
