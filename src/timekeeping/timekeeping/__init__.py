"""Timekeeping package.

Turns recognized check-in/check-out events into daily work-hour records and
monthly attendance summaries. Organized by feature modules (timelogs,
workhours, calendars, summaries, penalties) with a thin Flask controller
layer on top of service/repository layers.
"""
