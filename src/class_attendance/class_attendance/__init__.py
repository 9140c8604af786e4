"""Class Attendance package.

Feature modules (classes, students, attendance, reports) sit on top of a single
local JSON dataset. Each feature has pure repository functions over the dataset,
a service that persists through the store, and a thin Flask controller.
"""
