"""Worked solutions to the exercises in Python: basics, errors, types and stdlib."""