"""
Business services. Each public operation runs in one database transaction.
"""
