"""Account domain module.

This domain manages account identity, credentials, roles and the
active/deactivated lifecycle, including admin-access management.
"""
