"""
Backend package for the daily weather site.

Serves the prediction document produced by the daily job and records
newsletter subscribers, both backed by a single S3 bucket.
"""
