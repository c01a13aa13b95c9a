"""
general.
=======

Shared general-purpose modules used by the stemming stack: word extraction
(`token`) and config loading / debug logging (`utils`).
"""
