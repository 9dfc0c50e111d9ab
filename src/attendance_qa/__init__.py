"""Attendance answer validation.

Checks natural-language answers about student attendance against the structured
data that backs them. The Flask layer lives in ``main.py``; importing the
validation services does not load it.
"""
