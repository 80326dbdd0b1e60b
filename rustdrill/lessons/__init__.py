"""Worked solutions to many of the exercises, grouped by topic."""