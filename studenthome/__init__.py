"""
Student home page data: course tables, session statuses and action buttons
for the student dashboard.
"""
