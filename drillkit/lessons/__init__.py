"""Worked solutions to many of the practice exercises."""